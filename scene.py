import logging
import moderngl_window as mglw
from moderngl_window import WindowConfig, geometry
from pyrr import Matrix44
from pathlib import Path
from orbit.camera_pose import CameraPose
from orbit.camera_settings import CameraSettings
from orbit.input_sampler import InputSampler
from orbit.orbit_camera import OrbitController
from orbit.scene_object import SceneObject
from orbit.shader_program import ShaderProgram


# pip install -e .


# The controller reports pitch clamping and target moves at DEBUG
LOG_LEVEL = logging.DEBUG

INSTRUCTIONS = (
    "Mouse up or down: pitch",
    "Mouse left or right: yaw",
    "Mouse buttons: roll",
)


class Scene(WindowConfig):
    title = "Orbit Camera"
    window_size = (1024, 768)
    gl_version = (3, 3)
    resource_dir = (Path(__file__).parent / 'resources').resolve()
    samples = 4 # multi-sampling
    resizable = False
    vsync = True
    cursor = False

    def __init__(self, **kwargs):
        """Initializes the demo: a plane, a cube, a light and an orbit camera that starts at (5, 5, 5)
        looking at the origin. Mouse events are collected by an InputSampler and applied once per frame.
        """
        super().__init__(**kwargs)
        self.wnd.mouse_exclusivity = True # Raw pointer motion, cursor stays in the window

        self.input_sampler = InputSampler()

        # Set up the scene shaders
        self.shader_program = ShaderProgram(self.ctx)
        assert Path(self.resource_dir, "shaders/vertex.glsl").exists(), "Vertex shader program not found"
        assert Path(self.resource_dir, "shaders/fragment.glsl").exists(), "Fragment shader program not found"

        self.prog = self.shader_program.load_shader(
            name = "flat",
            vertex_path=self.resource_dir / 'shaders' / 'vertex.glsl',
            fragment_path=self.resource_dir / 'shaders' / 'fragment.glsl'
        )
        self.prog['light_pos'].value = (3.0, 8.0, 5.0)
        print(f"Loaded shader program successfully")

        # A 5x5 plane, kept slightly below y=0 so the cube sits on it
        self.floor = SceneObject(geometry.cube(), color=(0.3, 0.5, 0.3), position=(0.0, -0.01, 0.0), scale=(5.0, 0.02, 5.0))
        self.cube = SceneObject(geometry.cube(), color=(0.8, 0.7, 0.6), position=(1.5, 0.51, 1.5))

        # Setup orbit camera
        self.controller = OrbitController(
            pose=CameraPose.looking_at((5.0, 5.0, 5.0), (0.0, 0.0, 0.0)),
            settings=CameraSettings(),
        )
        self.controller.snap()

        for line in INSTRUCTIONS:
            print(line)

    def on_render(self, time: float, frame_time: float) -> None:
        """The rendering pipeline for this program.

        Args:
            time (float): The time of the start of the rendering.
            frame_time (float): The time since the last frame
        """

        # Mouse motion and buttons since the previous frame drive the camera
        pose = self.controller.update(self.input_sampler.sample(frame_time))

        self.ctx.clear(0.1, 0.1, 0.1)
        self.ctx.enable(self.ctx.DEPTH_TEST)

        view = pose.view_matrix()
        proj = Matrix44.perspective_projection(
            fovy=45.0,
            aspect=self.wnd.aspect_ratio,
            near=0.1,
            far=100.0,
            dtype='f4'
        )

        self.prog['view'].write(view.astype('f4').tobytes())
        self.prog['proj'].write(proj.astype('f4').tobytes())

        self.floor.render(self.prog)
        self.cube.render(self.prog)

    def on_mouse_position_event(self, x: int, y: int, dx: int, dy: int) -> None:
        self.input_sampler.add_motion(dx, dy)

    def on_mouse_drag_event(self, x: int, y: int, dx: int, dy: int) -> None:
        # Motion while a roll button is held still orbits
        self.input_sampler.add_motion(dx, dy)

    def on_mouse_press_event(self, x: int, y: int, button: int) -> None:
        self.input_sampler.press(button)

    def on_mouse_release_event(self, x: int, y: int, button: int) -> None:
        self.input_sampler.release(button)

    def on_iconify(self, iconified: bool) -> None:
        # Buttons released while minimized never reach us
        if iconified:
            self.input_sampler.reset()


def main():
    logging.basicConfig(level=LOG_LEVEL)
    mglw.run_window_config(Scene)


if __name__ == "__main__":
    main()
