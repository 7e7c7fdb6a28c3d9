#!/usr/bin/env python3
"""Command-line interface for the metro router."""

from .config import configure_logging
from .exceptions import MetroRouterError, UnknownStation
from .network import Network, get_network
from .routing import RouteFinder

QUIT_COMMANDS = ["/quit", "/exit", "/q"]


def print_banner():
    """Print the welcome banner."""
    print("""
╔═══════════════════════════════════════════════════════════╗
║                     Metro Router 🚇                       ║
║                                                           ║
║  Enter a start and a destination station to get the      ║
║  cheapest route (fewest stops and line changes).          ║
║                                                           ║
║  Commands:                                                ║
║    /stations - List all stations                          ║
║    /lines    - List lines with their terminals            ║
║    /quit     - Exit the program                           ║
╚═══════════════════════════════════════════════════════════╝
""")


def format_lines(network: Network) -> str:
    rows = []
    for line, stations in network.lines.items():
        rows.append(f"  {line}: {stations[0]} <-> {stations[-1]} ({len(stations)} stations)")
    return "\n".join(rows)


def format_stations(network: Network) -> str:
    rows = []
    for station in network.stations():
        lines = ", ".join(network.lines_at(station))
        rows.append(f"  {station} [{lines}]")
    return "\n".join(rows)


def plan_route(finder: RouteFinder, start: str, end: str) -> str:
    """Resolve loosely typed station names and describe the route between them."""
    network = finder.network
    resolved = []
    for name in (start, end):
        station = network.resolve(name)
        if station is None:
            raise UnknownStation(name, message=f"Unknown station: {name}")
        resolved.append(station)

    route = finder.find_route(*resolved)
    if route is None:
        return f"No route found from {resolved[0]} to {resolved[1]}."
    return str(route)


def main():
    """Run the interactive route lookup."""
    configure_logging("WARNING")
    network = get_network()
    finder = RouteFinder(network)

    print_banner()

    while True:
        try:
            start = input("\nFrom: ").strip()

            if not start:
                continue

            # Handle commands
            if start.lower() in QUIT_COMMANDS:
                print("\nGoodbye! Safe travels! 🚇")
                break

            if start.lower() == "/stations":
                print(format_stations(network))
                continue

            if start.lower() == "/lines":
                print(format_lines(network))
                continue

            end = input("To: ").strip()
            if not end:
                continue
            if end.lower() in QUIT_COMMANDS:
                print("\nGoodbye! Safe travels! 🚇")
                break

            print()
            print(plan_route(finder, start, end))

        except (KeyboardInterrupt, EOFError):
            print("\n\nGoodbye! Safe travels! 🚇")
            break
        except MetroRouterError as e:
            print(f"\n[Error: {e.message}]")
            print("Type /stations to see valid station names.")


if __name__ == "__main__":
    main()
