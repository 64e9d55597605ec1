# app.py
"""
Thin entrypoint for the proxy.

Usage example:
    uvicorn app:app --reload
    python app.py
"""

from pokeproxy.main import app, run  # re-export FastAPI instance

if __name__ == "__main__":
    run()
