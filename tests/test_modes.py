from __future__ import annotations

from data_bones.controls import Directives
from data_bones.render import build_draw_commands
from data_bones.simulation import step, update_asteroids, update_robots
from data_bones.world import Asteroid, Bone, Robot

REVEAL = Directives(reveal=True)
NO_KEYS = Directives()


def _far_bones() -> list[Bone]:
    # Out of the player's reach on platform 2.
    return [
        Bone(610, 380, 20, 20, hidden=True),
        Bone(650, 380, 20, 20, hidden=False),
        Bone(690, 380, 20, 20, hidden=True),
    ]


def test_reveal_parks_hidden_bones_without_touching_flags(world, stand_on_floor) -> None:
    stand_on_floor(world)
    world.bones.extend(_far_bones())

    step(world, NO_KEYS)
    assert len(world.active_bones()) == 3
    assert world.parked_bones() == []

    step(world, REVEAL)
    assert world.player.reveal
    assert [b.x for b in world.active_bones()] == [650]
    assert [b.x for b in world.parked_bones()] == [610, 690]
    assert all(b.hidden for b in world.parked_bones())

    # Holding the key does not park again or release anything.
    step(world, REVEAL)
    assert [b.x for b in world.parked_bones()] == [610, 690]

    step(world, NO_KEYS)
    assert not world.player.reveal
    assert world.parked_bones() == []
    # Restored bones go after the ones that stayed active.
    assert [(b.x, b.hidden) for b in world.bones] == [(650, False), (610, True), (690, True)]


def test_every_bone_is_active_or_parked(world, stand_on_floor) -> None:
    stand_on_floor(world)
    world.bones.extend(_far_bones())
    for directives in [NO_KEYS, REVEAL, REVEAL, NO_KEYS, REVEAL, NO_KEYS]:
        step(world, directives)
        active, parked = world.active_bones(), world.parked_bones()
        assert len(active) + len(parked) == 3
        assert not any(b in parked for b in active)


def test_hidden_bone_is_not_collected_without_reveal(world, stand_on_floor) -> None:
    stand_on_floor(world)
    world.bones.append(Bone(260, 580, 20, 20, hidden=True))

    for _ in range(3):
        step(world, NO_KEYS)
    assert len(world.bones) == 1
    assert world.score == 0


def test_hidden_bone_present_at_reveal_stays_parked(world, stand_on_floor) -> None:
    stand_on_floor(world)
    bone = Bone(260, 580, 20, 20, hidden=True)
    world.bones.append(bone)

    for _ in range(3):
        step(world, REVEAL)
        assert bone.parked
        assert world.bones == [bone]
        assert world.score == 0
    assert not any(c.x == 260 and c.y == 580 for c in build_draw_commands(world))

    # Back to a dimmed, uncollectable bone after release.
    step(world, NO_KEYS)
    assert not bone.parked
    assert world.bones == [bone]
    assert world.score == 0


def test_hidden_bone_spawned_during_reveal_is_collected(world, stand_on_floor) -> None:
    stand_on_floor(world)
    step(world, REVEAL)

    bone = Bone(260, 580, 20, 20, hidden=True)
    world.bones.append(bone)
    step(world, REVEAL)

    assert world.bones == []
    assert world.score == 1


def test_visible_bone_collects_without_reveal(world, stand_on_floor) -> None:
    stand_on_floor(world)
    world.bones.append(Bone(260, 580, 20, 20, hidden=False))
    step(world, NO_KEYS)
    assert world.bones == []
    assert world.score == 1


def test_slow_time_lasts_exactly_its_duration(world, stand_on_floor) -> None:
    stand_on_floor(world)
    duration = world.config.slow_time_duration
    assert duration == 120

    step(world, Directives(slow_time=True))
    active_frames = 1
    while world.player.slow_time:
        # Presses while active do nothing.
        step(world, Directives(slow_time=True) if active_frames % 2 else NO_KEYS)
        active_frames += 1
    assert active_frames == duration
    assert world.player.slow_time_left == 0


def test_slow_time_retriggers_only_after_expiry(world, stand_on_floor) -> None:
    stand_on_floor(world)
    hold = Directives(slow_time=True)
    for _ in range(119):
        step(world, hold)
        assert world.player.slow_time
    step(world, hold)
    assert not world.player.slow_time
    step(world, hold)
    assert world.player.slow_time
    assert world.player.slow_time_left == 119


def test_slow_time_halves_hazard_speed(world, stand_on_floor) -> None:
    stand_on_floor(world)
    world.asteroids.append(Asteroid(700, 100, 30, 30, speed=4.0))
    update_asteroids(world)
    assert world.asteroids[0].x == 696.0

    world.player.slow_time = True
    world.player.slow_time_left = 10
    update_asteroids(world)
    assert world.asteroids[0].x == 694.0


def test_slow_time_halves_robot_speed(world, stand_on_floor) -> None:
    stand_on_floor(world)
    world.player.slow_time = True
    world.player.slow_time_left = 100
    # Platform 1 spans x 300..500 with its top at y 500.
    robot = Robot(301, 460, 40, 40, speed=-2.0)
    world.robots.append(robot)

    update_robots(world)
    assert robot.x == 300.0
    update_robots(world)
    assert robot.x == 299.0
    assert robot.speed == 2.0

    update_robots(world)
    assert robot.x == 300.0
    for _ in range(400):
        update_robots(world)
        assert 299.0 <= robot.x <= 461.0
