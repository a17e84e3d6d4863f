"""Demo script: enumerate the setting polyhedron and run cube tests."""

import logging

import numpy as np

from cubetest import (
    default_system,
    feasible_hull,
    integer_points,
    largest_cube_edge,
    maximise,
    unit_cube_test,
)

logging.basicConfig(
    level=logging.DEBUG,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
)


def main():
    system = default_system()
    vertices = system.vertices()
    print(f"Vertices ({len(vertices)}):")
    for v in vertices:
        print(f"  {np.round(v, 3)}")

    hull = feasible_hull(vertices)
    if hull is not None:
        print(f"Hull: {len(hull.faces)} faces, volume {hull.volume:.3f}")

    best = maximise(vertices, np.array([1.0, 0.0, 1.0]))
    if best is not None:
        vertex, value = best
        print(f"Maximiser of x + z: {np.round(vertex, 3)} (value {value:.3f})")

    points = integer_points(system.half_spaces(), (-3, -1, -2), (2, 1, 1))
    print(f"Integer points: {len(points)}")

    z = np.array([-0.4, 0.2, 0.1])
    e = largest_cube_edge(system.A, system.b, z)
    print(f"Largest cube around {z}: edge {e:.3f}")
    x = unit_cube_test(system.A, system.b, z)
    print(f"Unit cube test: {x if x is not None else 'inconclusive'}")

    shrunk = system.cube_transformed(1.0)
    print(f"Cube-transformed polyhedron has {len(shrunk.vertices())} vertices")


if __name__ == "__main__":
    main()
