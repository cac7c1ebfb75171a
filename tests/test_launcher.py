import math
import random

import pytest

from jankbits.launcher import (
    DESPAWN_DISTANCE,
    EXPLODE_DISTANCE,
    FIREWORK_EFFECT,
    FIREWORK_PARTICLES,
    MAX_ANGLE,
    Firework,
    Launcher,
    Launchpad,
    Projectile,
    ProjectileExplosion,
    cleanup_projectiles,
    spawn_firework,
)
from jankbits.movement import Vec2
from jankbits.states import Key


def test_launcher_defaults():
    launcher = Launcher()
    assert launcher.position == Vec2(0.0, -300.0)
    assert launcher.height == 48.0
    assert launcher.direction == Vec2(-0.0, 1.0)


def test_rotate_left_is_positive():
    launcher = Launcher()
    launcher.rotate({Key.A}, 0.1)
    assert launcher.angle == pytest.approx(launcher.rotation_speed * 0.1)


def test_rotate_right_is_negative():
    launcher = Launcher()
    launcher.rotate({Key.RIGHT}, 0.1)
    assert launcher.angle == pytest.approx(-launcher.rotation_speed * 0.1)


def test_opposite_keys_cancel():
    launcher = Launcher()
    launcher.rotate({Key.A, Key.D}, 0.5)
    assert launcher.angle == 0.0


def test_rotation_is_clamped():
    launcher = Launcher()
    launcher.rotate({Key.LEFT}, 0.5)
    launcher.rotate({Key.LEFT}, 0.5)
    assert launcher.angle == MAX_ANGLE
    launcher.rotate({Key.D}, 10.0)
    assert abs(launcher.angle) <= MAX_ANGLE


def test_rotation_past_half_turn_wraps_before_clamping():
    launcher = Launcher(angle=1.0)
    launcher.rotate({Key.A}, 1.5)
    assert launcher.angle == -MAX_ANGLE


def test_shoot_from_barrel_tip():
    launcher = Launcher()
    projectile = launcher.shoot()
    assert projectile.position.x == pytest.approx(launcher.position.x)
    assert projectile.position.y == pytest.approx(launcher.position.y + launcher.height)
    assert projectile.velocity.length() == pytest.approx(launcher.projectile_speed)
    assert projectile.distance == 0.0


def test_shoot_after_left_turn_heads_left():
    launcher = Launcher()
    launcher.rotate({Key.A}, 0.3)
    projectile = launcher.shoot()
    assert projectile.velocity.x < 0 < projectile.velocity.y
    assert (projectile.position - launcher.position).length() == pytest.approx(launcher.height)


def test_projectile_advance_accumulates_distance():
    projectile = Projectile(Vec2(), Vec2(0.0, 500.0))
    projectile.advance(0.5)
    projectile.advance(0.5)
    assert projectile.distance == pytest.approx(projectile.position.length())
    assert projectile.position.x == 0.0
    assert projectile.position.y > 0


def test_cleanup_splits_by_distance():
    near = Projectile(Vec2(1.0, 1.0), Vec2(), distance=EXPLODE_DISTANCE)
    mid = Projectile(Vec2(2.0, 2.0), Vec2(), distance=EXPLODE_DISTANCE + 1)
    far = Projectile(Vec2(3.0, 3.0), Vec2(), distance=DESPAWN_DISTANCE + 1)
    remaining, explosions = cleanup_projectiles([near, mid, far])
    assert remaining == [near]
    assert explosions == [ProjectileExplosion(mid.position), ProjectileExplosion(far.position)]


def test_spawn_firework_particles_start_at_position():
    origin = Vec2(10.0, 20.0)
    firework = spawn_firework(origin, random.Random(1))
    assert len(firework.particles) == FIREWORK_PARTICLES
    assert all(p.position == origin for p in firework.particles)
    assert firework.effect == FIREWORK_EFFECT
    assert not firework.finished


def test_spawn_firework_is_deterministic_with_seed():
    a = spawn_firework(Vec2(), random.Random(7))
    b = spawn_firework(Vec2(), random.Random(7))
    assert a == b


def test_firework_expires():
    firework = spawn_firework(Vec2(), random.Random(3))
    steps = 0
    while firework.update(0.1):
        steps += 1
        assert steps < 100
    assert firework.finished
    assert firework.particles == []


def test_empty_firework_is_finished():
    assert Firework(Vec2(), []).update(0.1) is False


def test_launchpad_shot_explodes_into_firework():
    pad = Launchpad(random.Random(0))
    explosions = pad.update(set(), {Key.SPACE}, 0.0)
    assert explosions == []
    assert len(pad.projectiles) == 1

    collected = []
    for _ in range(200):
        collected.extend(pad.update(set(), set(), 1 / 60))
        if collected:
            break
    assert len(collected) == 1
    assert pad.projectiles == []
    assert len(pad.fireworks) == 1
    assert pad.fireworks[0].position == collected[0].position
    assert collected[0].position.y > pad.launcher.position.y


def test_launchpad_fireworks_are_dropped_when_done():
    pad = Launchpad(random.Random(0))
    pad.update(set(), {Key.SPACE}, 0.0)
    for _ in range(600):
        pad.update(set(), set(), 1 / 60)
    assert pad.projectiles == []
    assert pad.fireworks == []


def test_launchpad_rotation_aims_shots():
    pad = Launchpad(random.Random(0))
    pad.update({Key.D}, set(), 0.2)
    pad.update(set(), {Key.SPACE}, 0.0)
    velocity = pad.projectiles[0].velocity
    assert velocity.x > 0
    assert math.atan2(-velocity.x, velocity.y) == pytest.approx(pad.launcher.angle)