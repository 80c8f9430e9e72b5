"""Entry point: oneshot."""

import sys


def main():
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else ""

    if mode == "oneshot":
        from mxdirectory.interfaces.oneshot import main as run_oneshot_main

        args = sys.argv[2:]
        homeserver_url = None
        if "--homeserver" in args:
            idx = args.index("--homeserver")
            if idx + 1 >= len(args):
                print("Error: --homeserver needs a URL")
                sys.exit(2)
            homeserver_url = args[idx + 1]
            args = args[:idx] + args[idx + 2:]
        if args:
            query = " ".join(args).strip()
        else:
            query = sys.stdin.read().strip()
        sys.exit(run_oneshot_main(query=query, homeserver_url=homeserver_url))

    else:
        print(f"Unknown mode: {mode}")
        print("Usage: python -m mxdirectory.main oneshot [--homeserver URL] <query>")
        sys.exit(1)


if __name__ == "__main__":
    main()
