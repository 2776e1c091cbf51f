"""
Orbit Camera Controller
October 19th 2026

Shader Program Module
-------------------
This module provides a small cache of OpenGL shader programs for the demo scene.
Programs are compiled once through the ModernGL context and retrieved by name.
"""

# Imports
from pathlib import Path
from moderngl import Context, Program

class ShaderProgram:
    """
    A manager for OpenGL shader programs in a ModernGL context.

    Attributes:
        ctx (Context): The ModernGL context used for creating shader programs
        programs (dict): Dictionary mapping names to compiled shader programs
    """

    def __init__(self, ctx: Context):
        """Initializes the manager with an empty cache

        Args:
            ctx (Context): The modernGL context
        """

        self.ctx = ctx
        self.programs = {}

    def load_shader(self, name: str, vertex_path: Path, fragment_path: Path) -> Program:
        """
        Loads and compiles a shader program from source files, saves it by name.

        Args:
            name (str): The shader program name for retrieval
            vertex_path (Path): File path to the vertex shader source
            fragment_path (Path): File path to the fragment shader source

        Returns:
            Program: The compiled shader program
        """

        # Return existing program if already loaded
        if name in self.programs:
            return self.programs[name]

        vertex_src = Path(vertex_path).read_text()
        fragment_src = Path(fragment_path).read_text()

        return self.compile(name, vertex_src, fragment_src)

    def compile(self, name: str, vertex_src: str, fragment_src: str) -> Program:
        """
        Compiles a shader program from source strings and stores it by name.

        Args:
            name (str): The shader program name for retrieval
            vertex_src (str): Vertex shader source
            fragment_src (str): Fragment shader source

        Returns:
            Program: The compiled shader program
        """

        program = self.ctx.program(
            vertex_shader=vertex_src,
            fragment_shader=fragment_src,
        )
        self.programs[name] = program

        return program
