"""The firework launcher, its projectiles and the bursts they explode into."""

from __future__ import annotations

import math
import random
from collections.abc import Collection
from dataclasses import dataclass, field

from jankbits.movement import Vec2
from jankbits.states import Key

MAX_ANGLE = 1.2
"""Largest rotation, in radians, either side of straight up."""

DESPAWN_DISTANCE = 700.0
EXPLODE_DISTANCE = 500.0

LAUNCHER_COLOR = (0.3, 0.7, 0.3)
PROJECTILE_COLOR = (1.0, 0.5, 0.0)
PROJECTILE_SIZE = 12.0

FIREWORK_EFFECT = "shaders/test_firework.particle.ron"
FIREWORK_PARTICLES = 48
FIREWORK_SPEED = (80.0, 240.0)
FIREWORK_LIFETIME = (0.6, 1.2)
FIREWORK_GRAVITY = 120.0


def _wrap_angle(angle: float) -> float:
    return math.remainder(angle, math.tau)


@dataclass
class Projectile:
    """A shot travelling in a straight line, tracking how far it has gone."""

    position: Vec2
    velocity: Vec2
    distance: float = 0.0

    def advance(self, delta_secs: float) -> None:
        """Move along the velocity for ``delta_secs``."""
        movement = self.velocity * delta_secs
        self.position = self.position + movement
        self.distance += movement.length()


@dataclass
class Launcher:
    """A rotatable cannon anchored at its bottom centre."""

    position: Vec2 = field(default_factory=lambda: Vec2(0.0, -300.0))
    angle: float = 0.0
    rotation_speed: float = 2.0
    projectile_speed: float = 500.0
    height: float = 48.0
    width: float = 12.0

    @property
    def direction(self) -> Vec2:
        """Unit vector the barrel points along."""
        return Vec2(-math.sin(self.angle), math.cos(self.angle))

    def rotate(self, pressed: Collection[Key], delta_secs: float) -> None:
        """Turn left with A/Left and right with D/Right, within the angle limits."""
        direction = 0.0
        if Key.A in pressed or Key.LEFT in pressed:
            direction += 1.0
        if Key.D in pressed or Key.RIGHT in pressed:
            direction -= 1.0
        if direction == 0.0:
            return
        angle = _wrap_angle(self.angle + direction * self.rotation_speed * delta_secs)
        self.angle = max(-MAX_ANGLE, min(MAX_ANGLE, angle))

    def shoot(self) -> Projectile:
        """A projectile leaving the barrel's tip."""
        direction = self.direction
        return Projectile(
            position=self.position + direction * self.height,
            velocity=direction.normalize() * self.projectile_speed,
        )


@dataclass(frozen=True)
class ProjectileExplosion:
    """A projectile burst at ``position``."""

    position: Vec2


def cleanup_projectiles(
    projectiles: Collection[Projectile],
) -> tuple[list[Projectile], list[ProjectileExplosion]]:
    """Split projectiles into those still flying and explosions of the rest."""
    remaining: list[Projectile] = []
    explosions: list[ProjectileExplosion] = []
    for projectile in projectiles:
        should_despawn = projectile.distance > DESPAWN_DISTANCE
        should_explode = projectile.distance > EXPLODE_DISTANCE
        if should_explode:
            explosions.append(ProjectileExplosion(projectile.position))
        if not (should_despawn or should_explode):
            remaining.append(projectile)
    return remaining, explosions


@dataclass
class Particle:
    """One spark of a firework."""

    position: Vec2
    velocity: Vec2
    lifetime: float
    age: float = 0.0

    @property
    def alive(self) -> bool:
        return self.age < self.lifetime


@dataclass
class Firework:
    """A one-shot burst of particles that ends once every particle has expired."""

    position: Vec2
    particles: list[Particle]
    effect: str = FIREWORK_EFFECT

    @property
    def finished(self) -> bool:
        return not self.particles

    def update(self, delta_secs: float) -> bool:
        """Advance every particle; return whether the firework is still alive."""
        for particle in self.particles:
            particle.position = particle.position + particle.velocity * delta_secs
            particle.velocity = particle.velocity + Vec2(0.0, -FIREWORK_GRAVITY * delta_secs)
            particle.age += delta_secs
        self.particles = [particle for particle in self.particles if particle.alive]
        return not self.finished


def spawn_firework(position: Vec2, rng: random.Random | None = None) -> Firework:
    """A burst of particles flying outward from ``position``."""
    rng = rng or random.Random()
    particles = []
    for _ in range(FIREWORK_PARTICLES):
        heading = rng.uniform(0.0, math.tau)
        speed = rng.uniform(*FIREWORK_SPEED)
        particles.append(
            Particle(
                position=position,
                velocity=Vec2(math.cos(heading), math.sin(heading)) * speed,
                lifetime=rng.uniform(*FIREWORK_LIFETIME),
            )
        )
    return Firework(position, particles)


class Launchpad:
    """The launcher, its projectiles in flight and the fireworks they made."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.launcher = Launcher()
        self.projectiles: list[Projectile] = []
        self.fireworks: list[Firework] = []
        self._rng = rng or random.Random()

    def update(
        self,
        pressed: Collection[Key],
        just_pressed: Collection[Key],
        delta_secs: float,
    ) -> list[ProjectileExplosion]:
        """Run one frame; return the explosions that happened in it."""
        self.launcher.rotate(pressed, delta_secs)
        if Key.SPACE in just_pressed:
            self.projectiles.append(self.launcher.shoot())
        for projectile in self.projectiles:
            projectile.advance(delta_secs)
        self.projectiles, explosions = cleanup_projectiles(self.projectiles)
        self.fireworks = [firework for firework in self.fireworks if firework.update(delta_secs)]
        self.fireworks.extend(spawn_firework(e.position, self._rng) for e in explosions)
        return explosions