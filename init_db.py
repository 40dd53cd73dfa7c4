import asyncio

from backend.app.db import init_models

# Drops and recreates every table - DEV MODE ONLY
if __name__ == "__main__":
    asyncio.run(init_models(drop=True))
    print(">>> Tables Created Successfully!")
