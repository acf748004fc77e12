"""
Kiddy Calc Web Portal Launcher
Simple script to start the web server
"""
import sys


def main():
    print("Starting Kiddy Calc Web Portal...")
    print()

    try:
        import api
    except ImportError as e:
        print(f"Error importing modules: {e}")
        print("\nMake sure you have installed the required dependencies:")
        print("  pip install -e .")
        return 1

    try:
        api.main()
    except OSError as e:
        print(f"Error starting server: {e}")
        print("\nTroubleshooting:")
        print("1. Check if another application is using the port")
        print("2. Change WEB_PORT in config.py")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
