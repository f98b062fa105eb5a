"""
SweetLogic
Main application entry point
"""
import tkinter as tk
import subprocess
import sys
import os
import atexit
import config
from gui import SweetLogicGUI

# Global variable to track API process
api_process = None


def start_api_server():
    """Start the Flask API server in a separate process"""
    global api_process
    try:
        script_dir = os.path.dirname(os.path.abspath(__file__))
        api_path = os.path.join(script_dir, 'api.py')

        api_process = subprocess.Popen(
            [sys.executable, api_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=subprocess.CREATE_NEW_CONSOLE if sys.platform == 'win32' else 0
        )
        print(f"API server started (PID: {api_process.pid})")
        print(f"Web portal API: http://localhost:{config.WEB_PORT}/api")
    except OSError as e:
        print(f"Failed to start API server: {e}")


def cleanup_api_server():
    """Terminate the API server when the main application exits"""
    global api_process
    if api_process:
        try:
            api_process.terminate()
            api_process.wait(timeout=5)
            print("API server stopped")
        except (OSError, subprocess.TimeoutExpired) as e:
            print(f"Error stopping API server: {e}")
        api_process = None


def main():
    if config.WEB_PORTAL_ENABLED:
        start_api_server()
        atexit.register(cleanup_api_server)

    root = tk.Tk()
    SweetLogicGUI(root)
    root.mainloop()

    cleanup_api_server()


if __name__ == "__main__":
    main()
