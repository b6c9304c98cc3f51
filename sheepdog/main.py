"""
Main entry point for the sheepdog simulation.

Run with:
    python -m sheepdog.main                          # Interactive simulation
    python -m sheepdog.main --headless --ticks 5000  # Headless run
"""

import logging
import os


# Set dummy video driver for headless runs
def set_headless():
    """Enable headless mode."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def build_config(args):
    """Build the run configuration from a JSON file and command line overrides."""
    from .core.config import SimulationConfig, load_config

    config = load_config(args.config) if args.config else SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed
    if args.grid:
        config.useSpatialGrid = True
    return config.validate()


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import InteractiveSimulation

    print("=" * 60)
    print("Sheepdog: herd the flock into the pen")
    print("=" * 60)
    print("\nControls:")
    print("  Mouse - Move the dog")
    print("  ESC   - Quit")
    print("\nThe hatched corner top right is the pen; the score counts sheep inside it.")
    print("\nStarting simulation...")

    sim = InteractiveSimulation(config)
    sim.run()


def run_headless(config, ticks: int, waypoints=None, plot: bool = False):
    """
    Run the simulation without a display and print a summary.

    Args:
        config: Simulation configuration
        ticks: Number of ticks to run
        waypoints: Route for the predator
        plot: Show score and spread charts afterwards
    """
    set_headless()

    from .simulation.headless import HeadlessSimulation

    print("=" * 60)
    print("HEADLESS RUN")
    print("=" * 60)
    print(f"Ticks: {ticks}")
    print(f"Flock size: {config.flockSize}")
    print(f"Seed: {config.seed}")

    sim = HeadlessSimulation(config, waypoints=waypoints)
    summary = sim.run(ticks)

    print("\n" + "=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"Final score: {summary['final_score']}")
    print(f"Best score: {summary['best_score']}")
    first = summary["first_score_tick"]
    print(f"First sheep in pen: {'never' if first is None else f'tick {first}'}")
    cx, cy = summary["final_centroid"] if summary["final_centroid"] else (0.0, 0.0)
    print(f"Final centroid: ({cx:.1f}, {cy:.1f})")
    print(f"Mean spread: {summary['mean_spread']:.2f}")

    if plot:
        from .analysis.plotting import plot_run_summary
        plot_run_summary(summary)

    return summary


def parse_waypoints(text: str):
    """Parse 'x1,y1;x2,y2;...' into a list of (x, y) tuples."""
    points = []
    for pair in text.split(";"):
        pair = pair.strip()
        if not pair:
            continue
        x, y = pair.split(",")
        points.append((float(x), float(y)))
    return points


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Sheep flocking simulation with a sheepdog")
    parser.add_argument("--headless", action="store_true", help="Run without a display")
    parser.add_argument("--ticks", type=int, default=5000, help="Ticks to run in headless mode")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--grid", action="store_true", help="Use the spatial grid for neighbour scans")
    parser.add_argument("--waypoints", type=parse_waypoints, default=None,
                        help="Predator route for headless mode, e.g. '50,50;300,200'")
    parser.add_argument("--plot", action="store_true", help="Plot the headless run")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    config = build_config(args)

    if args.headless:
        return run_headless(config, args.ticks, waypoints=args.waypoints, plot=args.plot)
    run_interactive(config)


if __name__ == "__main__":
    main()
