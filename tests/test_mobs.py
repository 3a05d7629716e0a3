import pytest

from brawldefender.entities import make_mob
from brawldefender.mobs import advance_mobs, animate_mob, move_mob


def test_first_step_moves_right_by_speed():
    mob = make_mob("tier1", 0, 0)
    start_x, start_y = mob.pos.x, mob.pos.y
    move_mob(mob)
    assert mob.pos.x == start_x + mob.speed
    assert mob.pos.y == start_y
    assert mob.move_stade == 0


def test_turns_down_at_first_corner():
    mob = make_mob("tier2", 10, 0)
    mob.pos.x = 315 + 10 + 1
    y_before = mob.pos.y
    move_mob(mob)
    assert mob.move_stade == 1
    assert mob.rotation == 90.0
    assert mob.pos.y == y_before + mob.speed


def test_move_gap_shifts_corner():
    mob = make_mob("tier1", 50, 0)
    mob.pos.x = 340
    move_mob(mob)
    assert mob.move_stade == 0
    assert mob.pos.x == 340 + mob.speed


@pytest.mark.parametrize("tier", ["tier1", "tier3"])
@pytest.mark.parametrize("gap", [0, 64, 129])
def test_full_path_reaches_exit(tier, gap):
    mob = make_mob(tier, gap, 50)
    stages = [mob.move_stade]
    for _ in range(20000):
        move_mob(mob)
        stages.append(mob.move_stade)
        if mob.move_stade == 10 and mob.pos.x < -30:
            break
    assert mob.move_stade == 10
    assert mob.pos.x < -30
    assert stages == sorted(stages)
    assert set(stages) == set(range(11))


def test_mob_stops_after_exit():
    mob = make_mob("tier1", 0, 0)
    mob.move_stade = 10
    mob.pos.x = -40
    move_mob(mob)
    assert mob.pos.x == -40


def test_animation_cycles_through_frames():
    mob = make_mob("tier1", 0, 0)
    lefts = []
    for _ in range(9):
        animate_mob(mob)
        lefts.append(mob.rect.left)
    assert lefts[:7] == [128 * n for n in range(1, 8)]
    assert lefts[7] == 0
    assert lefts[8] == 128


def test_advance_mobs_moves_and_animates_on_hundred():
    mob = make_mob("tier1", 0, 0)
    x = mob.pos.x
    advance_mobs([mob], 200)
    assert mob.pos.x == x + mob.speed
    assert mob.rect.left == 128


def test_advance_mobs_only_moves_on_ten():
    mob = make_mob("tier1", 0, 0)
    x = mob.pos.x
    advance_mobs([mob], 30)
    assert mob.pos.x == x + mob.speed
    assert mob.rect.left == 0


def test_advance_mobs_idle_otherwise():
    mob = make_mob("tier1", 0, 0)
    x = mob.pos.x
    advance_mobs([mob], 37)
    assert mob.pos.x == x
    assert mob.rect.left == 0


def test_advance_mobs_uses_spawn_time():
    mob = make_mob("tier1", 0, 0)
    mob.spawned_ms = 5
    x = mob.pos.x
    advance_mobs([mob], 100)
    assert mob.pos.x == x
    advance_mobs([mob], 105)
    assert mob.pos.x == x + mob.speed
    assert mob.rect.left == 128