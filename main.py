import os
import sys
import math
import argparse
import subprocess
import shutil

os.environ['GL_SILENCE_DEPRECATION'] = '1'

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np

from animation.clock import FrameClock
from animation.easing import CURVES
from animation.roll import Roll
from foil.crinkle import CRINKLES
from foil.foil import Foil
from foil.foils import FOILS
from foil.geometry import TextDirection
from visualization.blend import BlendMode
from visualization.raster import ImageSurface


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Foil shimmer demo")
    parser.add_argument("--record", action="store_true",
                        help="Render headless and save an image sequence")
    parser.add_argument("--fps", type=int, default=30,
                        help="Frame rate for recording (default: 30)")
    parser.add_argument("--seconds", type=float, default=6.0,
                        help="Recording length in seconds (default: 6)")
    parser.add_argument("--width", type=int, default=420,
                        help="Card width in pixels (default: 420)")
    parser.add_argument("--height", type=int, default=600,
                        help="Card height in pixels (default: 600)")
    parser.add_argument("--format", choices=["jpg", "png"], default="png",
                        help="Image format (default: png)")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Output directory (default: recordings/)")
    parser.add_argument("--gradient", choices=sorted(FOILS), default="linear_rainbow",
                        help="Gradient preset (default: linear_rainbow)")
    parser.add_argument("--crinkle", choices=sorted(CRINKLES), default="twinkling",
                        help="Roll preset; 'smooth' does not animate (default: twinkling)")
    parser.add_argument("--blend", choices=[m.value for m in BlendMode], default=BlendMode.SRC_ATOP.value,
                        help="Blend mode of the gradient over the card (default: src_atop)")
    parser.add_argument("--curve", choices=sorted(CURVES), default="linear",
                        help="Easing curve for both animation stages (default: linear)")
    parser.add_argument("--duration", type=float, default=0.5,
                        help="Gradient transition duration in seconds (default: 0.5)")
    parser.add_argument("--speed", type=float, default=0.15,
                        help="Position smoothing duration in seconds (default: 0.15)")
    parser.add_argument("--opacity", type=float, default=1.0,
                        help="Gradient opacity 0..1 (default: 1.0)")
    parser.add_argument("--absolute", action="store_true",
                        help="Map the pointer absolutely instead of relative to the press point")
    parser.add_argument("--no-sensor", action="store_true",
                        help="Ignore pointer input for positioning")
    parser.add_argument("--aggressive", action="store_true",
                        help="Interpolate between gradients of different shape stop by stop")
    parser.add_argument("--rtl", action="store_true",
                        help="Lay out directional alignments right-to-left")
    args = parser.parse_args(argv)
    if not 0.0 <= args.opacity <= 1.0:
        parser.error("--opacity must be between 0 and 1")
    if args.fps <= 0 or args.seconds <= 0:
        parser.error("--fps and --seconds must be positive")
    return args


def make_card(width, height, radius=24.0):
    """Straight-alpha RGBA card: a dark rounded rectangle with a faint inner frame."""
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32) + 0.5
    # signed distance to the rounded rectangle
    qx = np.abs(xs - width / 2.0) - (width / 2.0 - radius)
    qy = np.abs(ys - height / 2.0) - (height / 2.0 - radius)
    outside = np.hypot(np.maximum(qx, 0.0), np.maximum(qy, 0.0))
    inside = np.minimum(np.maximum(qx, qy), 0.0)
    dist = outside + inside - radius

    card = np.zeros((height, width, 4), dtype=np.float32)
    shade = 0.12 + 0.08 * (ys / height)
    card[..., 0] = shade
    card[..., 1] = shade * 1.1
    card[..., 2] = shade * 1.6
    frame = np.abs(dist + 14.0) < 1.5
    card[frame, :3] = 0.45
    card[..., 3] = np.clip(0.5 - dist, 0.0, 1.0)
    return card


def setup(args, clock):
    """Create the shared roll and the foil. The roll subscribes first so foils read its value on the same tick."""
    roll = Roll(CRINKLES[args.crinkle], clock=clock)
    foil = Foil(
        gradient=FOILS[args.gradient],
        roll=roll,
        clock=clock,
        opacity=args.opacity,
        blend_mode=BlendMode(args.blend),
        use_sensor=not args.no_sensor,
        aggressive=args.aggressive,
        duration=args.duration,
        speed=args.speed,
        curve=CURVES[args.curve],
        use_relative_position=not args.absolute,
    )
    return roll, foil


def run_interactive(args):
    import glfw
    from OpenGL import GL as gl
    from core.window import AppWindow
    from core.shader import ShaderProgram
    from core.renderer import FoilRenderer

    app = AppWindow(width=args.width, height=args.height, title="Foil")
    base_dir = os.path.dirname(os.path.abspath(__file__))
    shader = ShaderProgram(
        os.path.join(base_dir, "shaders", "foil.vert"),
        os.path.join(base_dir, "shaders", "foil.frag"),
    )
    direction = TextDirection.RTL if args.rtl else TextDirection.LTR
    renderer = FoilRenderer(shader, make_card(args.width, args.height), direction=direction)

    clock = FrameClock()
    roll, foil = setup(args, clock)

    gradient_names = sorted(FOILS)
    crinkle_names = sorted(CRINKLES)
    blend_modes = list(BlendMode)
    state = {
        'gradient': gradient_names.index(args.gradient),
        'crinkle': crinkle_names.index(args.crinkle),
        'blend': blend_modes.index(BlendMode(args.blend)),
    }

    def on_key(key, scancode, action, mods):
        if action != glfw.PRESS:
            return
        if key == glfw.KEY_ESCAPE:
            app.close()
        elif key == glfw.KEY_G:
            state['gradient'] = (state['gradient'] + 1) % len(gradient_names)
            name = gradient_names[state['gradient']]
            foil.gradient = FOILS[name]
            print(f"Gradient: {name}")
        elif key == glfw.KEY_C:
            state['crinkle'] = (state['crinkle'] + 1) % len(crinkle_names)
            name = crinkle_names[state['crinkle']]
            roll.reconfigure(CRINKLES[name])
            print(f"Crinkle: {name}")
        elif key == glfw.KEY_B:
            state['blend'] = (state['blend'] + 1) % len(blend_modes)
            foil.blend_mode = blend_modes[state['blend']]
            print(f"Blend: {foil.blend_mode.value}")
        elif key == glfw.KEY_U:
            foil.set_unwrapped(not foil.unwrapped)
            print(f"Unwrapped: {foil.unwrapped}")
        elif key == glfw.KEY_S:
            foil.use_sensor = not foil.use_sensor
            print(f"Sensor: {foil.use_sensor}")
        sys.stdout.flush()

    app.add_key_callback(on_key)
    app.add_pointer_callback(foil.handle)

    print("=== Foil ===")
    print("Controls:")
    print("  Mouse drag : Tilt the foil")
    print("  G          : Next gradient")
    print("  C          : Next crinkle")
    print("  B          : Next blend mode")
    print("  U          : Toggle unwrapped")
    print("  S          : Toggle pointer sensor")
    print("  Esc        : Quit")
    print()
    sys.stdout.flush()

    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glDisable(gl.GL_BLEND)
    gl.glClearColor(0.0, 0.0, 0.0, 1.0)

    last_time = glfw.get_time()
    while not app.should_close():
        current_time = glfw.get_time()
        dt = min(current_time - last_time, 0.05)
        last_time = current_time

        clock.tick(dt)

        renderer.resize(*app.get_window_size())
        foil.paint(renderer)

        fb_w, fb_h = app.get_framebuffer_size()
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        renderer.draw(fb_w, fb_h)
        app.swap_and_poll()

    foil.dispose()
    roll.dispose()
    renderer.destroy()
    shader.destroy()
    app.terminate()


def pointer_path(i, total, width, height):
    """A slow figure-eight around the card center, one loop per recording."""
    a = 2.0 * math.pi * i / max(total, 1)
    x = width * (0.5 + 0.3 * math.sin(a))
    y = height * (0.5 + 0.2 * math.sin(2.0 * a))
    return x, y


def run_record(args):
    base_dir = os.path.dirname(os.path.abspath(__file__))
    out_dir = args.output_dir or os.path.join(base_dir, "recordings")
    os.makedirs(out_dir, exist_ok=True)

    ext = args.format
    save_kwargs = {"quality": 95} if ext == "jpg" else {}

    direction = TextDirection.RTL if args.rtl else TextDirection.LTR
    surface = ImageSurface(make_card(args.width, args.height), direction=direction)
    clock = FrameClock()
    roll, foil = setup(args, clock)

    total_frames = int(args.seconds * args.fps)
    dt = 1.0 / args.fps

    print(f"=== Recording: {total_frames} frames @ {args.fps}fps ===")
    print(f"  Gradient : {args.gradient}  crinkle: {args.crinkle}  blend: {args.blend}")
    print(f"  Output   : {out_dir}/frame_XXXXX.{ext}")
    print(f"  Size     : {args.width}x{args.height} (numpy surface)")
    print()
    sys.stdout.flush()

    foil.layout(args.width, args.height)
    foil.pointer_down(*pointer_path(0, total_frames, args.width, args.height))

    for i in range(total_frames):
        foil.pointer_move(*pointer_path(i, total_frames, args.width, args.height))
        clock.tick(dt)
        foil.paint(surface)

        img = surface.to_image()
        if ext == "jpg":
            img = img.convert("RGB")
        img.save(os.path.join(out_dir, f"frame_{i:05d}.{ext}"), **save_kwargs)

        if (i + 1) % args.fps == 0 or i == total_frames - 1:
            pct = (i + 1) / total_frames * 100
            print(f"  [{i+1}/{total_frames}] {pct:.0f}%  t={clock.elapsed:.1f}s  roll={roll.value:+.2f}")
            sys.stdout.flush()

    foil.pointer_up()
    foil.dispose()
    roll.dispose()
    print(f"\nDone. {total_frames} frames saved to {out_dir}/ ({surface.paint_count} repaints)")

    if shutil.which("ffmpeg"):
        mp4_path = os.path.join(out_dir, "foil.mp4")
        frame_pattern = os.path.join(out_dir, f"frame_%05d.{ext}")
        cmd = [
            "ffmpeg", "-y",
            "-framerate", str(args.fps),
            "-i", frame_pattern,
            "-c:v", "libx264",
            "-crf", "18",
            "-pix_fmt", "yuv420p",
            "-vf", "pad=ceil(iw/2)*2:ceil(ih/2)*2",
            mp4_path,
        ]
        print(f"\n=== Encoding video ===")
        print(f"  {' '.join(cmd)}")
        subprocess.run(cmd, check=True)
        size_mb = os.path.getsize(mp4_path) / (1024 * 1024)
        print(f"\n  Video saved: {mp4_path} ({size_mb:.1f} MB)")
    else:
        print("\n  ffmpeg not found, skipping video encoding.")
        print(f"  Frames at: {out_dir}/")


def main(argv=None):
    args = parse_args(argv)
    if args.record:
        run_record(args)
    else:
        run_interactive(args)


if __name__ == '__main__':
    main()
