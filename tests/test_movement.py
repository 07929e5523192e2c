import pytest

from hacktivist.movement import (
    ENERGY_FLOOR,
    HITBOX_OFFSET,
    KATANA_LAST_FRAME,
    KATANA_STEP,
    SPRINT_SCALE,
    WALK_SCALE,
    Facing,
    Player,
)


def test_step_up_moves_by_speed():
    player = Player(x=100.0, y=100.0, speed=2.0)
    assert player.step(Facing.UP) == (100.0, 98.0)
    assert player.facing == Facing.UP
    assert player.texture == "top"
    assert player.hitbox == (100.0, 98.0 - HITBOX_OFFSET)


def test_step_right_sets_hitbox_ahead():
    player = Player(x=10.0, y=20.0, speed=1.0)
    player.step(Facing.RIGHT)
    assert player.hitbox == (11.0 + HITBOX_OFFSET, 20.0)
    assert player.texture == "right"


def test_step_while_sprinting_uses_multiplier():
    player = Player(x=0.0, y=0.0, speed=2.0, sprint_multiplier=3.0, sprinting=True)
    player.step(Facing.DOWN)
    assert player.y == 6.0
    assert player.texture == "downsprint"


def test_step_and_back_returns_to_start():
    player = Player(x=50.0, y=60.0, speed=1.5)
    player.step(Facing.LEFT)
    player.step(Facing.RIGHT)
    assert (player.x, player.y) == (50.0, 60.0)


def test_step_locked_does_not_move():
    player = Player(x=5.0, y=5.0, locked=True)
    assert player.step(Facing.UP) == (5.0, 5.0)


@pytest.mark.parametrize("facing", [Facing.UP_LEFT, Facing.DOWN_RIGHT])
def test_step_diagonal_raises(facing):
    with pytest.raises(ValueError):
        Player().step(facing)


def test_toggle_attack_edge_triggered():
    player = Player()
    assert player.toggle_attack(True) is True
    assert player.toggle_attack(True) is True
    assert player.toggle_attack(False) is True
    player.locked = True
    assert player.toggle_attack(True) is False
    assert player.locked is False


def test_try_sprint_requires_endurance_and_floor():
    player = Player(endurance=False)
    assert player.try_sprint(True, True, True) is False
    player.endurance = True
    assert player.try_sprint(True, True, False) is False
    assert player.try_sprint(True, True, True) is True
    assert player.sprite_scale == SPRINT_SCALE


def test_update_endurance_drains_energy():
    player = Player(energy=50.0, energy_malus=2.0, sprinting=True)
    assert player.update_endurance(True, True, True, 1.0) is True
    assert player.energy == 48.0


def test_update_endurance_no_drain_with_sugar():
    player = Player(energy=50.0, sprinting=True, sugar_effect=True)
    assert player.update_endurance(True, True, True, 1.0) is False
    assert player.energy == 50.0


def test_update_endurance_no_drain_before_tick():
    player = Player(energy=50.0, sprinting=True)
    assert player.update_endurance(True, True, True, 0.0) is False
    assert player.energy == 50.0


def test_update_endurance_exhaustion_stops_sprint():
    player = Player(energy=float(ENERGY_FLOOR), sprinting=True)
    player.update_endurance(True, True, True, 1.0)
    assert player.endurance is False
    assert player.sprinting is False
    assert player.sprite_scale == WALK_SCALE
    assert player.try_sprint(True, True, True) is False


def test_update_endurance_recovers_when_energy_high():
    player = Player(energy=90.0, endurance=False)
    player.update_endurance(False, False, True, 0.0)
    assert player.endurance is True


def test_releasing_sprint_key_stops_sprint():
    player = Player(sprinting=True, sprite_scale=SPRINT_SCALE)
    player.update_endurance(False, True, True, 0.0)
    assert player.sprinting is False
    assert player.sprite_scale == WALK_SCALE


def test_energy_bar_width_tracks_energy():
    player = Player(energy=90.0)
    assert player.energy_bar_width * 3 == player.energy


def test_katana_swing_runs_to_last_frame():
    player = Player(facing=Facing.LEFT)
    player.toggle_attack(True)
    frames = 0
    while player.attacking:
        assert player.advance_katana(1.0) is True
        assert player.texture == "katana_left"
        frames += 1
        assert frames < 1000
    assert player.katana_left > KATANA_LAST_FRAME
    assert player.katana_left - KATANA_STEP <= KATANA_LAST_FRAME
    assert player.locked is False


def test_katana_waits_for_delay_and_locks():
    player = Player(attacking=True)
    assert player.advance_katana(0.0) is False
    assert player.locked is True
    assert player.katana_left == 0


def test_katana_resets_when_not_attacking():
    player = Player(katana_left=KATANA_STEP)
    assert player.advance_katana(1.0) is False
    assert player.katana_left == 0


def test_toggle_map_edge_triggered():
    player = Player()
    assert player.toggle_map(True) is True
    assert player.toggle_map(True) is True
    assert player.toggle_map(False) is True
    assert player.toggle_map(True) is False


def test_camera_follows_previous_sprite_position():
    player = Player(x=300.0, y=400.0, speed=0.0)
    first = player.camera_center()
    assert first == (-15.0, 0.0)
    assert player.sprite_position == (300.0, 400.0)
    assert player.camera_center() == (285.0, 400.0)


def test_view_size_scales_with_zoom():
    player = Player(screensize=0.5)
    assert player.view_size == (960.0, 540.0)