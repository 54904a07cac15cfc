"""Interactive console menu for the route planner.

The menu loads the network once, then answers queries until the user
leaves. Every location is entered by its numeric id.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import EcoRouteError
from .io.batch import BatchProcessor, parse_segments
from .logging_setup import configure_logging
from .ports.graph import GraphRepositoryPort
from .services import RoutePlannerService

logger = logging.getLogger(__name__)

EXIT_OPTION = 6

MENU = """
==========================
=== Choose an option: ====
==========================
1. Fastest route
2. Fastest route and independent alternative
3. Route avoiding locations/segments
4. Eco route (drive, park, walk)
5. Run batch mode (input file -> output file)
6. Exit
=========================="""

InputFn = Callable[[str], str]


class Menu:
    """Numbered menu bound to a planner and a batch processor."""

    def __init__(
        self,
        planner: RoutePlannerService,
        batch: BatchProcessor,
        config: AppConfig,
        input_fn: Optional[InputFn] = None,
    ) -> None:
        self.planner = planner
        self.batch = batch
        self.config = config
        self.input = input_fn or input

    def _ask_int(self, prompt: str) -> int:
        return int(self.input(prompt).strip())

    def _ask_optional_int(self, prompt: str) -> Optional[int]:
        value = self.input(prompt).strip()
        return int(value) if value else None

    def _ask_ids(self, prompt: str) -> List[int]:
        value = self.input(prompt).strip()
        return [int(item) for item in value.split(",") if item.strip()]

    def _ask_segments(self, prompt: str) -> List[Tuple[int, int]]:
        return parse_segments(self.input(prompt))

    def fastest(self) -> None:
        source = self._ask_int("Source id: ")
        dest = self._ask_int("Destination id: ")
        route = self.planner.fastest(source, dest)
        if route.is_empty:
            print("No route possible.")
        else:
            print(f"Fastest route: {self.planner.format_route(route)}")

    def alternative(self) -> None:
        source = self._ask_int("Source id: ")
        dest = self._ask_int("Destination id: ")
        main, alt = self.planner.alternative(source, dest)
        print(f"Fastest route: {self.planner.format_route(main)}")
        print(f"Alternative route: {self.planner.format_route(alt)}")

    def restricted(self) -> None:
        source = self._ask_int("Source id: ")
        dest = self._ask_int("Destination id: ")
        avoid = self._ask_ids("Locations to avoid (e.g. 2,3, empty for none): ")
        segments = self._ask_segments("Segments to avoid (e.g. (1,2),(3,4)): ")
        include = self._ask_optional_int("Location to pass through (empty for none): ")
        route = self.planner.restricted(source, dest, avoid, segments, include)
        print(f"Restricted route: {self.planner.format_route(route)}")

    def eco(self) -> None:
        source = self._ask_int("Source id: ")
        dest = self._ask_int("Destination id: ")
        max_walk = self._ask_int("Maximum walking time: ")
        avoid = self._ask_ids("Locations to avoid (e.g. 2,3, empty for none): ")
        segments = self._ask_segments("Segments to avoid (e.g. (1,2),(3,4)): ")
        route = self.planner.eco(source, dest, max_walk, avoid, segments)
        if not route.found:
            print(route.message)
            return
        print(f"Driving route: {self.planner.format_path(route.drive_path)}({route.drive_time})")
        print(f"Parking: {self.planner.ids_of([route.parking])[0]}")
        print(f"Walking route: {self.planner.format_path(route.walk_path)}({route.walk_time})")
        print(f"Total time: {route.total_time}")

    def run_batch(self) -> None:
        batch_config = self.config.batch
        self.batch.run(batch_config.input_file, batch_config.output_file)
        print(f"Batch processed. See {batch_config.output_file}")

    def handle(self, option: int) -> bool:
        """Run one menu option. Returns False when the user asked to exit."""
        actions = {
            1: self.fastest,
            2: self.alternative,
            3: self.restricted,
            4: self.eco,
            5: self.run_batch,
        }
        if option == EXIT_OPTION:
            print("Leaving the application. Thank you!")
            return False

        action = actions.get(option)
        if action is None:
            print("Invalid option. Try again.")
            return True

        try:
            action()
        except ValueError:
            print("Invalid input. Please enter numbers.")
        except EcoRouteError as e:
            logger.warning("Query failed", extra={"option": option, "error": str(e)})
            print(f"Error: {e}")
        return True

    def loop(self) -> None:
        running = True
        while running:
            print(MENU)
            try:
                option = int(self.input("> ").strip())
            except ValueError:
                print("Invalid input. Please enter a number.")
                continue
            running = self.handle(option)


def main(config: Optional[AppConfig] = None) -> None:
    config = config or get_config()
    configure_logging(config.observability)

    container = Container.create_default(config)
    repository = container.resolve(GraphRepositoryPort)
    try:
        graph = repository.load()
    except EcoRouteError as e:
        print(f"Cannot load data: {e}")
        raise SystemExit(1)

    print("=== Loaded data ===")
    print(f"Locations: {len(graph)}")
    print(f"Segments: {graph.edge_count}")

    menu = Menu(
        planner=container.resolve(RoutePlannerService),
        batch=container.resolve(BatchProcessor),
        config=config,
    )
    try:
        menu.loop()
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
