#!/usr/bin/env python3
"""
Demo: A Forest Growing on Its Own

Plants a handful of trees of four species and lets the world run:

1. Mature trees drop seeds in late autumn
2. Seeds only take root where no tree already claims the space
3. Trees die once they outlive their own lifespan

Prints the population of each species at the end of every simulated year.
"""

import logging

from hakoniwa.analysis import PopulationHistory, density_grid
from hakoniwa.core import SimulationConfig
from hakoniwa.scenarios import ForestConfig, create_forest


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  FOREST GROWTH DEMONSTRATION")
    print("=" * 60)

    n_years = 10
    config = ForestConfig(
        width=300,
        height=300,
        initial_trees=30,
        seed=7,
        simulation=SimulationConfig(log_interval=24 * 365),
    )
    simulation = create_forest(config)
    ticks_per_year = config.calendar.one_year_of_time

    print(f"\n1. Planted {len(simulation.context.objects)} trees on a "
          f"{config.width}x{config.height} map")

    history = PopulationHistory()
    history.record(simulation.context)

    print(f"\n2. Running {n_years} years ({n_years * ticks_per_year} ticks)...")
    for _ in range(n_years):
        stats = simulation.run(ticks_per_year)
        history.record(simulation.context)
        time = simulation.context.time
        print(f"   year {time.year}: {stats['n_objects']} trees "
              f"(+{stats['created']} / -{stats['removed']}), "
              f"{stats['n_events']} events remembered")

    print("\n3. Population by species:")
    names = history.names()
    counts = history.as_array(names)
    print("   " + "".join(f"{name:>10}" for name in names))
    for row in counts:
        print("   " + "".join(f"{n:>10}" for n in row))

    grid = density_grid(simulation.context, config.width, config.height, cell=50)
    print("\n4. Trees per 50x50 cell:")
    for row in grid:
        print("   " + " ".join(f"{n:>3}" for n in row))


if __name__ == "__main__":
    main()
