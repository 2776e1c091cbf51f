"""
Orbit Camera Controller
October 19th 2026

Scene Object Module
------------------
A flat-coloured mesh placed in the demo scene. It couples a VAO with a
position, a scale and a colour, and writes the matching uniforms before
drawing itself.
"""

# Imports
from pyrr import Matrix44
from moderngl import Program

class SceneObject:
    """
    A renderable object in the demo scene.

    Attributes:
        vao: The vertex array object containing the mesh geometry
        color (tuple): RGB base colour in [0, 1]
        position (list): 3D position [x, y, z] of the object in world space
        scale (list): Scale factors [sx, sy, sz] for the object
    """

    def __init__(self, vao, color, position=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0)):
        """Initializes an object to be rendered via its mesh VAO.

        Args:
            vao (VAO): mesh from moderngl_window.geometry
            color (tuple): RGB base colour
            position (tuple, optional): world position. Defaults to the origin.
            scale (tuple, optional): per-axis scale. Defaults to (1, 1, 1).
        """

        self.vao = vao
        self.color = tuple(color)
        self.position = list(position)
        self.scale = list(scale)

    def get_model_matrix(self) -> Matrix44:
        """Calculates the model matrix M = T * S

        Returns:
            Matrix44: The model matrix
        """

        # pyrr matrices are row-major, so the left-most factor applies first
        return Matrix44.from_scale(self.scale) @ Matrix44.from_translation(self.position)

    def render(self, prog: Program):
        """Renders the object onto the scene.

        Args:
            prog (Program): The shader program to use
        """

        prog["base_color"].value = self.color
        prog["model"].write(self.get_model_matrix().astype('f4').tobytes())
        self.vao.render(prog)
