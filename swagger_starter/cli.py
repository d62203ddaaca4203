"""
Swagger Starter CLI — serve the provider API, stage packages, check file lines.

Usage:
    python -m swagger_starter.cli serve                    # Run the API server
    python -m swagger_starter.cli prepare PATH [OPTIONS]   # Stage PATH/<options> into PATH/package
    python -m swagger_starter.cli check-lines FILE LINE... # Check FILE contains LINEs in order
"""
import sys

from swagger_starter.observability import configure_logging


def cmd_serve():
    from swagger_starter.api_server import main as server_main
    server_main()


def cmd_prepare():
    from swagger_starter.packaging import prepare_packages
    if len(sys.argv) < 3:
        print("Usage: python -m swagger_starter.cli prepare PATH [OPTIONS]")
        sys.exit(1)
    path = sys.argv[2]
    options = sys.argv[3] if len(sys.argv) > 3 else "server"
    result = prepare_packages(path, options)
    print(result.status if result.ok else f"{result.status}: {result.message}")
    for staged in result.staged:
        print(f"  {staged}")
    if not result.ok:
        sys.exit(1)


def cmd_check_lines():
    from swagger_starter.matchers import contains_lines_in_relative_order
    if len(sys.argv) < 3:
        print("Usage: python -m swagger_starter.cli check-lines FILE LINE...")
        sys.exit(1)
    matcher = contains_lines_in_relative_order(*sys.argv[3:])
    if matcher.matches(sys.argv[2]):
        print("match")
        return
    print(f"Expected: {matcher.describe_to()}")
    print(f"     but: {matcher.describe_mismatch(sys.argv[2])}")
    sys.exit(1)


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(0)
    configure_logging()
    cmd = sys.argv[1]
    commands = {
        "serve": cmd_serve,
        "prepare": cmd_prepare,
        "check-lines": cmd_check_lines,
    }
    if cmd not in commands:
        print(f"Unknown command: {cmd}")
        print(f"Available: {', '.join(commands)}")
        sys.exit(1)
    commands[cmd]()


if __name__ == "__main__":
    main()
