from data_bones.world import Asteroid

DANGER_RADIUS = 120
JUMP_RANGE = 60


def policy(env):
    # Strategy: hazards first, bones second. If an asteroid or robot is about to
    # reach Byte, jump (when grounded) and hold think mode to slow it down.
    # Otherwise walk toward the nearest bone that can be picked up right now.
    # Pressing deep search parks the hidden bones already on screen, so it is
    # only kept held while chasing a hidden bone that spawned during the press.
    world = env.world
    player = world.player
    px = player.x + player.width / 2
    py = player.y + player.height / 2

    left = right = jump = reveal = slow = 0

    for hazard in list(world.asteroids) + list(world.robots):
        hx = hazard.x + hazard.width / 2
        hy = hazard.y + hazard.height / 2
        dx, dy = hx - px, hy - py
        # Asteroids store a leftward speed, robots a signed one.
        vx = -hazard.speed if isinstance(hazard, Asteroid) else hazard.speed
        if abs(dx) < DANGER_RADIUS and abs(dy) < DANGER_RADIUS:
            slow = 1
            if abs(dx) < JUMP_RANGE and vx * dx < 0:
                jump = 1

    targets = [b for b in world.bones if world.is_collectable(b)]
    if targets:
        target = min(targets, key=lambda b: abs(b.x + b.width / 2 - px) + abs(b.y - player.y))
        tx = target.x + target.width / 2
        if tx < px - 2:
            left = 1
        elif tx > px + 2:
            right = 1
        if target.y + target.height < player.y:
            jump = 1  # bone sits on a higher platform
        reveal = int(target.hidden)

    return [left, right, jump, reveal, slow]
