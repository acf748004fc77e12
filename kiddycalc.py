"""
Kiddy Calc
Main application entry point
"""
import atexit
import os
import subprocess
import sys
import tkinter as tk

import config
from gui import KiddyCalcGUI

# Web portal process, when one was started
portal_process = None


def start_web_portal():
    """Start the Flask web portal in a separate process"""
    global portal_process
    script_dir = os.path.dirname(os.path.abspath(__file__))
    api_path = os.path.join(script_dir, 'api.py')

    try:
        portal_process = subprocess.Popen(
            [sys.executable, api_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        print(f"Failed to start web portal: {e}")
        return None

    print(f"Web portal started (PID: {portal_process.pid})")
    print("=" * 60)
    print(f"🌈 {config.APP_NAME} in your browser: http://{config.WEB_HOST}:{config.WEB_PORT}")
    print("=" * 60)
    return portal_process


def stop_web_portal():
    """Terminate the web portal when the main application exits"""
    global portal_process
    if portal_process is None:
        return
    try:
        portal_process.terminate()
        portal_process.wait(timeout=5)
        print("Web portal stopped")
    except subprocess.TimeoutExpired:
        portal_process.kill()
        print("Web portal killed")
    portal_process = None


def main():
    if config.LAUNCH_WEB_PORTAL:
        start_web_portal()
        atexit.register(stop_web_portal)

    root = tk.Tk()
    KiddyCalcGUI(root)
    root.mainloop()

    stop_web_portal()


if __name__ == "__main__":
    main()
