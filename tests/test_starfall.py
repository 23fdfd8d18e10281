import pytest

from retrovram.starfall import ROW_BYTES, Star, Starfield


def test_random_stars_are_within_source_ranges():
    field = Starfield(seed=7)
    assert len(field.stars) == 80
    for star in field.stars:
        assert star.y % 8 == 0
        assert 0 <= star.y < 400
        assert 1 <= star.speed <= 3
        assert 1 <= star.color <= 6


def test_same_seed_gives_same_stars():
    first = Starfield(seed=42)
    second = Starfield(seed=42)
    assert first.stars == second.stars


def test_too_many_stars_rejected():
    with pytest.raises(ValueError):
        Starfield(count=81)


def test_bad_height_rejected():
    with pytest.raises(ValueError):
        Starfield(height=0)


def test_star_drawn_in_its_colour_planes():
    field = Starfield(stars=[Star(y=10, speed=2, color=5)])
    field.step()
    offset = 12 * ROW_BYTES
    assert field.screen[0][offset] == 1
    assert field.screen[1][offset] == 0
    assert field.screen[2][offset] == 1
    assert field.stars[0].y == 12


def test_star_moves_and_old_pixel_is_erased():
    field = Starfield(stars=[Star(y=10, speed=2, color=1)])
    field.step()
    field.step()
    assert field.screen[0][12 * ROW_BYTES] == 0
    assert field.screen[0][14 * ROW_BYTES] == 1
    assert sum(field.screen[0]) == 1


def test_star_column_matches_its_index():
    stars = [Star(y=0, speed=1, color=2), Star(y=0, speed=1, color=2)]
    field = Starfield(stars=stars)
    field.step()
    assert field.screen[1][ROW_BYTES] == 1
    assert field.screen[1][ROW_BYTES + 1] == 1


def test_position_wraps_at_height():
    field = Starfield(stars=[Star(y=399, speed=3, color=1)])
    field.step()
    assert field.stars[0].y == 2


def test_advance_first_draws_below_new_line():
    field = Starfield(stars=[Star(y=10, speed=2, color=1)], advance_first=True)
    field.step()
    assert field.stars[0].y == 12
    assert field.screen[0][14 * ROW_BYTES] == 1


def test_writes_past_plane_end_are_dropped():
    field = Starfield(
        height=200, stars=[Star(y=199, speed=3, color=7)], advance_first=False
    )
    field.step()
    assert all(len(field.screen[i]) == ROW_BYTES * 200 for i in range(4))
    assert all(sum(field.screen[i]) == 0 for i in range(3))


def test_fourth_plane_never_touched():
    field = Starfield(seed=3)
    totals = [sum(screen[3]) for screen in field.frames(20)]
    assert totals == [0] * 20


def test_frames_yields_requested_count():
    field = Starfield(stars=[Star(y=0, speed=1, color=1)])
    frames = list(field.frames(5))
    assert len(frames) == 5
    assert field.stars[0].y == 5


def test_each_plane_holds_at_most_one_pixel_per_star():
    field = Starfield(seed=11)
    for screen in field.frames(50):
        for index in range(3):
            lit = sum(screen[index])
            assert lit <= len(field.stars)
            assert all(byte in (0, 1) for byte in screen[index])