"""
Main entrypoint for the YelpCamp web application.

Usage:
    Serve the site directly (`python main.py`) or through uvicorn (`uvicorn src.api.app:app`).
    Fill the database with sample campgrounds with `python -m src.seeds.seed`.

The database is chosen with the DB_URL environment variable.
"""
import uvicorn

from src.api.app import app

HOST = "0.0.0.0"
PORT = 3000


def main():
    """
    Main function to run the web server.
    """
    try:
        print(f"Server is running on port {PORT}")
        uvicorn.run(app, host=HOST, port=PORT)
        return 0
    except Exception as e:
        print(f"An error occurred in the main function: {str(e)}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
