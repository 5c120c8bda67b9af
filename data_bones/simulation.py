"""
Per-frame update of a World.

`step()` is the only entry point the loop and the environment use; the
helpers are public so each phase can be exercised on its own. They run in
this order every frame:

    input -> player physics -> platforms -> slow-time countdown
          -> asteroids -> robots -> bones -> spawning -> draw commands
"""
from __future__ import annotations

import logging

from data_bones.controls import Directives
from data_bones.render import Frame, build_draw_commands
from data_bones.world import World

logger = logging.getLogger(__name__)


def step(world: World, directives: Directives) -> Frame:
    world.frame += 1

    if world.message and directives.any_key and not world.key_held:
        world.message = None
    world.key_held = directives.any_key

    apply_input(world, directives)
    integrate_player(world, directives)
    resolve_platforms(world)
    update_slow_time(world)

    hit = update_asteroids(world) or update_robots(world)
    collect_bones(world)
    spawn_entities(world)

    return Frame(build_draw_commands(world), world.score, world.message, game_over=hit)


def apply_input(world: World, directives: Directives) -> None:
    player = world.player

    # Airborne presses are dropped, not buffered.
    if directives.jump and player.grounded:
        player.vy = world.config.jump_power
        player.grounded = False

    if directives.reveal and not player.reveal:
        player.reveal = True
        logger.debug("reveal mode on, %d hidden bones parked", world.park_hidden_bones())
    elif not directives.reveal:
        # Runs every released frame; a no-op once nothing is parked.
        player.reveal = False
        world.restore_parked_bones()

    if directives.slow_time and not player.slow_time:
        player.slow_time = True
        player.slow_time_left = world.config.slow_time_duration
        logger.debug("slow-time on for %d frames", player.slow_time_left)


def integrate_player(world: World, directives: Directives) -> None:
    cfg = world.config
    player = world.player

    player.x += directives.horizontal * cfg.player_speed
    # Gravity applies even when grounded; landing corrects it.
    player.vy += cfg.gravity
    player.y += player.vy

    if player.x < 0:
        player.x = 0
    if player.right > cfg.width:
        player.x = cfg.width - player.width

    player.grounded = False
    if player.bottom > cfg.height:
        player.y = cfg.height - player.height
        player.vy = 0.0
        player.grounded = True


def resolve_platforms(world: World) -> None:
    """
    Land on a platform entered from above.

    Platforms are checked in list order. A landing zeroes vy, so once one
    platform catches the player no later platform qualifies that frame.
    """
    player = world.player
    for plat in world.platforms:
        if (
            player.collides(plat)
            and player.vy > 0
            and player.bottom - player.vy <= plat.top
        ):
            player.y = plat.top - player.height
            player.vy = 0.0
            player.grounded = True


def update_slow_time(world: World) -> None:
    player = world.player
    if not player.slow_time:
        return
    player.slow_time_left -= 1
    if player.slow_time_left <= 0:
        player.slow_time = False
        logger.debug("slow-time expired at frame %d", world.frame)


def update_asteroids(world: World) -> bool:
    """Move asteroids left. Returns True if one hit the player."""
    # Off-screen asteroids are dropped before moving, so new ones always move once.
    world.asteroids[:] = [a for a in world.asteroids if a.x > -a.width]
    factor = world.slow_factor
    for asteroid in world.asteroids:
        asteroid.x -= asteroid.speed * factor
        if world.player.collides(asteroid):
            world.reset_after_collision()
            return True
    return False


def update_robots(world: World) -> bool:
    """Patrol robots along their platform. Returns True if one hit the player."""
    factor = world.slow_factor
    for robot in world.robots:
        robot.x += robot.speed * factor
        plat = world.platform_under(robot)
        if plat is not None and (robot.x < plat.x or robot.right > plat.right):
            robot.speed = -robot.speed
        if world.player.collides(robot):
            world.reset_after_collision()
            return True
    return False


def collect_bones(world: World) -> int:
    player = world.player
    kept = []
    collected = 0
    for bone in world.bones:
        if player.collides(bone) and world.is_collectable(bone):
            collected += 1
        else:
            kept.append(bone)
    world.bones[:] = kept
    world.score += collected
    return collected


def spawn_entities(world: World) -> None:
    cfg = world.config
    if world.frame % cfg.bone_interval == 0:
        world.spawn_bone()
    if world.frame % cfg.asteroid_interval == 0:
        world.spawn_asteroid()
    if world.frame % cfg.robot_interval == 0:
        world.spawn_robot()
