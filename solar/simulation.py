"""
Frame-driven solar system simulation.

Owns the body registry and the integrator. The host's frame loop calls
update() once per displayed frame; each call advances the physics by exactly
one fixed step regardless of wall-clock frame time. The renderer reads a
FrameSnapshot afterwards and never touches the registry itself.
"""

from typing import Sequence

from config import solar as config
from .bodies import Body, BodyDescriptor
from .constants import PhysicsConfig
from .diagnostics import Diagnostics
from .initializer import build_registry
from .integrator import GravityIntegrator
from .render import FrameSnapshot


def load_descriptors(rows: Sequence[dict] = None):
    """Body descriptors from a BODIES-style table (defaults to config.solar.BODIES)."""
    rows = config.BODIES if rows is None else rows
    return [BodyDescriptor.from_dict(row) for row in rows]


class SolarSystemSimulation:
    """Anchor-centered N-body system advanced one fixed step per frame."""

    def __init__(self, descriptors: Sequence[BodyDescriptor] = None, physics: PhysicsConfig = None,
                 steps_per_frame: int = None):
        self.descriptors = list(descriptors) if descriptors is not None else load_descriptors()
        self.physics = physics if physics is not None else PhysicsConfig.from_config(config.PHYSICS)

        if steps_per_frame is None:
            steps_per_frame = int(config.SIMULATION.get("steps_per_frame", 1))
        if steps_per_frame < 1:
            raise ValueError(f"steps_per_frame must be at least 1, got {steps_per_frame}")
        self.steps_per_frame = steps_per_frame

        self.integrator = GravityIntegrator(self.physics)
        self.registry = build_registry(self.descriptors, self.physics)

        self.frame = 0
        self.steps = 0
        self.paused = False

        print(f"[Solar] Initialized {len(self.registry)} bodies "
              f"(anchor: {self.registry.anchor.name}, dt={self.physics.time_step:g}s)")

    @property
    def num_bodies(self) -> int:
        return len(self.registry)

    @property
    def sim_time(self) -> float:
        """Simulated seconds since the last reset."""
        return self.steps * self.physics.time_step

    def update(self, dt: float = None):
        """
        Advance one frame. dt is the host's frame time and is ignored by the
        physics, which always uses the configured fixed step.
        """
        if self.paused:
            return

        for _ in range(self.steps_per_frame):
            self.integrator.step(self.registry)
            self.steps += 1
        self.frame += 1

    def run(self, frames: int):
        """Run a number of frames back to back."""
        for _ in range(frames):
            self.update()

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        print(f"[Solar] {'Paused' if self.paused else 'Running'}")
        return self.paused

    def reset(self):
        """Rebuild the registry from the body table."""
        print("[Solar] Resetting simulation...")
        self.registry = build_registry(self.descriptors, self.physics)
        self.frame = 0
        self.steps = 0

    def select(self, index: int) -> Body:
        """Body at a registry index (0 is the anchor)."""
        return self.registry[index]

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot.capture(self.registry, frame=self.frame, sim_time=self.sim_time)

    def diagnostics(self) -> Diagnostics:
        return Diagnostics.measure(self.registry, self.physics.G, step=self.steps, sim_time=self.sim_time)
