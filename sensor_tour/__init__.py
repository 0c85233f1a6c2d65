# Re-export convenient entry points for external use

from .pointset import (
    Point,
    PointSet,
    TourError,
    EmptyInputError,
    IndexOutOfBoundsError,
    NoUnvisitedPointsError,
)

from .geometry import (
    euclidean_distance,
    distances_to,
    compute_path_cost,
    generate_grid_points,
    generate_random_points,
)

from .tour import (
    Neighbor,
    Tour,
    TourBuilder,
    BuildState,
    closest_unvisited,
    brute_force_closest,
    random_start,
    first_start,
    build_tour,
)

from .utils import (
    read_points,
    write_tour,
    save_tour_result,
    load_tour_result,
    duration,
    timed,
)

from .experiment import (
    run,
    benchmark_search,
)

from .plotting import (
    plot_tour,
    show_tour,
)
