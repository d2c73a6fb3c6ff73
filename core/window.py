import glfw
from OpenGL import GL as gl

from foil.pointer_tracker import PointerEvent, PointerKind


class AppWindow:
    def __init__(self, width=900, height=600, title="Foil", visible=True):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 4)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 1)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, glfw.TRUE)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.COCOA_RETINA_FRAMEBUFFER, glfw.TRUE)
        glfw.window_hint(glfw.VISIBLE, glfw.TRUE if visible else glfw.FALSE)

        self.window = glfw.create_window(width, height, title, None, None)
        if not self.window:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")

        glfw.make_context_current(self.window)
        glfw.swap_interval(1)

        fb_w, fb_h = glfw.get_framebuffer_size(self.window)
        gl.glViewport(0, 0, fb_w, fb_h)

        glfw.set_framebuffer_size_callback(self.window, self._framebuffer_size_callback)

        self._key_callbacks = []
        self._pointer_callbacks = []
        glfw.set_key_callback(self.window, self._key_callback)
        glfw.set_cursor_pos_callback(self.window, self._cursor_pos_callback)
        glfw.set_mouse_button_callback(self.window, self._mouse_button_callback)

        self.mouse_pressed = False
        self.last_mouse_x = 0.0
        self.last_mouse_y = 0.0

    def _framebuffer_size_callback(self, window, width, height):
        gl.glViewport(0, 0, width, height)

    def _key_callback(self, window, key, scancode, action, mods):
        for cb in self._key_callbacks:
            cb(key, scancode, action, mods)

    def _emit(self, kind: PointerKind, x: float, y: float):
        event = PointerEvent(kind, x, y)
        for cb in self._pointer_callbacks:
            cb(event)

    def _cursor_pos_callback(self, window, xpos, ypos):
        self.last_mouse_x = xpos
        self.last_mouse_y = ypos
        kind = PointerKind.MOVE if self.mouse_pressed else PointerKind.HOVER
        self._emit(kind, xpos, ypos)

    def _mouse_button_callback(self, window, button, action, mods):
        if button != glfw.MOUSE_BUTTON_LEFT:
            return
        self.mouse_pressed = (action == glfw.PRESS)
        kind = PointerKind.DOWN if self.mouse_pressed else PointerKind.UP
        self._emit(kind, self.last_mouse_x, self.last_mouse_y)

    def add_key_callback(self, cb):
        self._key_callbacks.append(cb)

    def add_pointer_callback(self, cb):
        """cb(PointerEvent) with the cursor in window coordinates."""
        self._pointer_callbacks.append(cb)

    def get_window_size(self):
        return glfw.get_window_size(self.window)

    def get_framebuffer_size(self):
        return glfw.get_framebuffer_size(self.window)

    def should_close(self):
        return glfw.window_should_close(self.window)

    def close(self):
        glfw.set_window_should_close(self.window, True)

    def swap_and_poll(self):
        glfw.swap_buffers(self.window)
        glfw.poll_events()

    def terminate(self):
        glfw.terminate()
