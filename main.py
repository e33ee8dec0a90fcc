"""
Solar System Frame Loop
=======================

Drives the gravity engine the way a renderer does: one fixed integration
step per displayed frame, then a read-only snapshot converted to render
space. Without a window attached the snapshot is summarized as a status line.

Usage:
    python main.py                         # 600 frames at the configured FPS
    python main.py --frames 0              # Run until Ctrl+C
    python main.py --fps 0                 # Uncapped
    python main.py --follow 3              # Report the body at index 3 (0 = anchor)
"""

import time
import argparse

from config import solar as config
from solar import RenderScale, SolarError, SolarSystemSimulation


class SolarApplication:
    """Frame loop host for the solar system simulation."""

    def __init__(self, target_fps: int = None, follow: int = 0, status_every: int = 60):
        print("[App] Initializing solar system simulation...")
        self.simulation = SolarSystemSimulation()
        self.scale = RenderScale.from_config(config.RENDER)

        self.target_fps = config.SIMULATION["target_fps"] if target_fps is None else target_fps
        self.follow = follow
        self.status_every = max(1, status_every)

        # Validate the follow target up front
        self.simulation.select(self.follow)

        self.running = True
        self.fps = 0.0
        self.frame_count = 0
        print("[App] Ready!")

    def _update(self):
        self.simulation.update()

    def _render(self):
        """Consume the frame's snapshot the way a renderer would."""
        snapshot = self.simulation.snapshot()
        positions, _ = snapshot.to_render_space(self.scale)

        if self.frame_count % self.status_every == 0:
            target = positions[self.follow]
            name = snapshot.names[self.follow]
            days = snapshot.sim_time / 86400.0
            print(f"[App] Frame {snapshot.frame:>6d} | Day {days:9.1f} | FPS: {self.fps:5.0f} | "
                  f"{name}: ({target[0]:8.3f}, {target[1]:8.3f}, {target[2]:8.3f})")

    def run(self, frames: int = 0):
        """Main loop. frames == 0 runs until interrupted."""
        print("[App] Starting main loop...")
        frame_budget = 1.0 / self.target_fps if self.target_fps else 0.0
        last = time.perf_counter()

        try:
            while self.running:
                self.frame_count += 1
                self._update()
                self._render()

                if frames and self.frame_count >= frames:
                    self.running = False

                elapsed = time.perf_counter() - last
                if elapsed < frame_budget:
                    time.sleep(frame_budget - elapsed)
                now = time.perf_counter()
                self.fps = 1.0 / max(now - last, 1e-9)
                last = now
        except KeyboardInterrupt:
            print("\n[App] Interrupted")

        print("[App] Shutdown complete")


def main():
    parser = argparse.ArgumentParser(description="Solar system frame loop")
    parser.add_argument("--frames", type=int, default=600, help="Frames to run (0 = until Ctrl+C)")
    parser.add_argument("--fps", type=int, help="Target frame rate (0 = uncapped)")
    parser.add_argument("--follow", type=int, default=0, help="Body index to report (0 = anchor)")
    parser.add_argument("--status-every", type=int, default=60, help="Frames between status lines")
    args = parser.parse_args()

    try:
        app = SolarApplication(target_fps=args.fps, follow=args.follow, status_every=args.status_every)
        app.run(args.frames)
    except (SolarError, IndexError) as e:
        print(f"[App] Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
