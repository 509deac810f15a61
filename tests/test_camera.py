import pygame

from map_explorer.camera import Camera, Rect


def test_zoom_stays_within_limits():
    camera = Camera(800, 600)
    for _ in range(5):
        camera.zoom_in()
    assert camera.zoom == 4.0

    for _ in range(10):
        camera.zoom_out()
    assert camera.zoom == 0.25


def test_zoom_is_power_of_two():
    camera = Camera(800, 600)
    camera.zoom_in()
    camera.zoom_in()
    camera.zoom_out()
    assert camera.zoom == 2.0


def test_scroll_speed_shrinks_with_zoom():
    camera = Camera(800, 600)
    camera.scroll(1, 0)
    assert camera.x == 10.0

    camera.zoom_in()
    camera.scroll(0, 1)
    assert camera.y == 5.0


def test_clamp_keeps_window_inside_map():
    camera = Camera(800, 600)
    camera.x, camera.y = 5000.0, -30.0

    camera.clamp_to(4096, 4096)

    assert camera.x == 4096 - 800
    assert camera.y == 0.0


def test_clamp_to_zero_when_map_smaller_than_view():
    camera = Camera(800, 600)
    camera.zoom_out()
    camera.x, camera.y = 50.0, 50.0

    camera.clamp_to(1000, 1000)

    assert (camera.x, camera.y) == (0.0, 0.0)


def test_source_rect_divides_screen_by_zoom():
    camera = Camera(800, 600)
    camera.zoom_out()
    camera.x, camera.y = 12.5, 3.0

    assert camera.source_rect() == Rect(12.5, 3.0, 1600.0, 1200.0)


def test_rect_to_pygame_truncates():
    assert Rect(1.9, 2.2, 10.7, 5.5).to_pygame() == pygame.Rect(1, 2, 10, 5)
