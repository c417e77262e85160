"""Entry point for running as a module."""
from music_match.api import app
from music_match.config import env_int, load_local_env_file
import uvicorn

if __name__ == "__main__":
    load_local_env_file()
    port = env_int("PORT", 8000)
    uvicorn.run(app, host="0.0.0.0", port=port)
