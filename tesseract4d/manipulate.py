import numpy as np
from math import cos, sin, radians


def frame_angle(rotation_speed, elapsed_time):
    """Rotation for one frame, in degrees."""
    return rotation_speed * elapsed_time


def rotation_matrix_xw(angle):
    """
    Row-vector matrix for a rotation of `angle` degrees in the x-w plane:
    x' = x*cos + w*sin, w' = -x*sin + w*cos. y and z are left alone.
    """
    c, s = cos(radians(angle)), sin(radians(angle))
    rot = np.eye(4)
    rot[[0, 3], [0, 3]] = c
    rot[[0, 3], [3, 0]] = [-s, s]
    return rot


def rotation_matrix_yz(angle):
    """Same as rotation_matrix_xw but for the y-z plane."""
    c, s = cos(radians(angle)), sin(radians(angle))
    rot = np.eye(4)
    rot[[1, 2], [1, 2]] = c
    rot[[1, 2], [2, 1]] = [-s, s]
    return rot


def rotate_xw(vertex, angle):
    """Rotate a single (x, y, z, w) vertex in the x-w plane by `angle` degrees."""
    x, y, z, w = vertex
    cos_a = cos(radians(angle))
    sin_a = sin(radians(angle))
    x_prime = x*cos_a + w*sin_a
    w_prime = -x*sin_a + w*cos_a
    return (x_prime, y, z, w_prime)


def rotate_yz(vertex, angle):
    """Rotate a single (x, y, z, w) vertex in the y-z plane by `angle` degrees."""
    x, y, z, w = vertex
    cos_a = cos(radians(angle))
    sin_a = sin(radians(angle))
    y_prime = y*cos_a + z*sin_a
    z_prime = -y*sin_a + z*cos_a
    return (x, y_prime, z_prime, w)


def rotate_vertices(vertices, angle):
    """
    Apply the x-w rotation and then the y-z rotation, both by `angle`
    degrees, to every row of `vertices`. The array is overwritten in place
    so repeated calls accumulate.
    """
    rotation = np.dot(rotation_matrix_xw(angle), rotation_matrix_yz(angle))
    vertices[:] = np.dot(vertices, rotation)
    return vertices
