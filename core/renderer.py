import ctypes
import numpy as np
from OpenGL import GL as gl

from foil.gradients import MAX_STOPS
from visualization.blend import BlendMode
from visualization.shading import TILE_INDEX, resolve, strongest_layers


class FoilRenderer:
    """GL paint surface: the foil shader blended over a child texture.

    Same protocol as visualization.raster.ImageSurface (size, direction,
    paint(command)), so a Foil paints into either. paint() only uploads
    uniforms; draw() redraws the last command every frame.
    """
    MAX_LAYERS = 4

    def __init__(self, shader, child: np.ndarray, direction=None):
        self.shader = shader
        self.direction = direction
        self.command = None
        self.paint_count = 0
        self._size = (child.shape[1], child.shape[0])

        self.vao = gl.glGenVertexArrays(1)
        gl.glBindVertexArray(self.vao)

        # Two triangles covering clip space
        quad = np.array([
            -1.0, -1.0, 1.0, -1.0, 1.0, 1.0,
            -1.0, -1.0, 1.0, 1.0, -1.0, 1.0,
        ], dtype=np.float32)
        self.vbo = gl.glGenBuffers(1)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, quad.nbytes, quad, gl.GL_STATIC_DRAW)
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(0, 2, gl.GL_FLOAT, gl.GL_FALSE, 2 * 4, ctypes.c_void_p(0))
        gl.glBindVertexArray(0)

        self.texture = gl.glGenTextures(1)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        self.set_child(child)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def resize(self, width: int, height: int):
        self._size = (int(width), int(height))

    def set_child(self, child: np.ndarray):
        """Straight-alpha RGBA in 0..1, (height, width, 4), first row on top."""
        data = np.ascontiguousarray(child, dtype=np.float32)
        h, w = data.shape[:2]
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(gl.GL_TEXTURE_2D, 0, gl.GL_RGBA32F, w, h, 0,
                        gl.GL_RGBA, gl.GL_FLOAT, data)

    def paint(self, command):
        self.command = command
        self.paint_count += 1
        self.shader.use()

        params = resolve(command.gradient, command.mask_rect, command.direction)
        layers = strongest_layers(params, self.MAX_LAYERS)
        self.shader.set_int("u_layer_count", len(layers))
        for i, layer in enumerate(layers):
            prefix = f"u_layers[{i}]"
            count = len(layer.stops)
            stops = list(layer.stops) + [layer.stops[-1]] * (MAX_STOPS - count)
            colors = list(layer.colors) + [layer.colors[-1]] * (MAX_STOPS - count)
            self.shader.set_int(f"{prefix}.kind", layer.kind)
            self.shader.set_int(f"{prefix}.count", count)
            self.shader.set_int(f"{prefix}.tile", TILE_INDEX[layer.tile_mode])
            self.shader.set_vec2(f"{prefix}.p0", layer.p0)
            self.shader.set_vec2(f"{prefix}.p1", layer.p1)
            self.shader.set_float(f"{prefix}.weight", layer.weight)
            self.shader.set_mat3(f"{prefix}.inverse", layer.inverse_matrix)
            self.shader.set_float_array(f"{prefix}.stops", stops)
            self.shader.set_vec4_array(f"{prefix}.colors", colors)

        b = command.bounds
        self.shader.set_vec4("u_bounds", (b.left, b.top, b.right, b.bottom))
        self.shader.set_int("u_blend", command.blend_mode.index)

    def draw(self, fb_w: int, fb_h: int):
        self.shader.use()
        if self.command is None:
            # Nothing painted yet; show the child as is
            self.shader.set_int("u_layer_count", 0)
            self.shader.set_int("u_blend", BlendMode.DST.index)
        self.shader.set_vec2("u_size", self._size)
        self.shader.set_vec2("u_framebuffer", (fb_w, fb_h))
        self.shader.set_int("u_child", 0)

        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture)
        gl.glBindVertexArray(self.vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, 6)
        gl.glBindVertexArray(0)

    def destroy(self):
        gl.glDeleteTextures(1, [self.texture])
        gl.glDeleteBuffers(1, [self.vbo])
        gl.glDeleteVertexArrays(1, [self.vao])
