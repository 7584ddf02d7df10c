from cubengine.components import Sprite, Transform, Velocity
from cubengine.images import new_image


def test_velocity_starts_at_rest():
    vel = Velocity()
    assert (vel.vel_x, vel.vel_y) == (0.0, 0.0)


def test_transform_starts_at_origin():
    tr = Transform()
    assert (tr.pos_x, tr.pos_y, tr.rot) == (0.0, 0.0, 0)


def test_transform_is_mutable():
    tr = Transform()
    tr.pos_x += 2
    tr.pos_y -= 4
    assert (tr.pos_x, tr.pos_y) == (2, -4)


def test_sprite_holds_shared_image():
    img = new_image(2, 2)
    sprite = Sprite(img)
    img.pixels[0] = 5
    assert sprite.image.pixels[0] == 5
    assert Sprite().image is None