import argparse
import os
import secrets

import uvicorn
from dotenv import load_dotenv
from loguru import logger


def create_env_file():
    """
    Create .env from .env.sample if it doesn't exist yet
    """
    if os.path.exists(".env"):
        return

    if not os.path.exists(".env.sample"):
        logger.warning("No .env.sample found. Create a .env file manually.")
        return

    logger.info("Creating .env from .env.sample...")
    with open(".env.sample", "r") as sample_file:
        env_content = sample_file.read()

    # Fill in a random signing secret
    env_content = env_content.replace("your_secret_key_here", secrets.token_urlsafe(32))

    with open(".env", "w") as env_file:
        env_file.write(env_content)

    logger.info("Created .env. Set AI_API_KEY and the database settings before starting the service.")


def main():
    """
    Run the career guide service
    """
    parser = argparse.ArgumentParser(description="Run the Career Guide Service")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", 5000)), help="Port to bind")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args()

    create_env_file()
    load_dotenv(dotenv_path=".env", override=True)

    logger.info(f"Server running on http://{args.host}:{args.port}")
    logger.info(f"API docs at http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
