import asyncio
import os

from dotenv import load_dotenv

from x402_autopay import SessionConfig, run_once

load_dotenv()

PRIVATE_KEY = os.getenv("PRIVATE_KEY")
if not PRIVATE_KEY:
    raise SystemExit("PRIVATE_KEY env var must be set")

config = SessionConfig(
    private_key=PRIVATE_KEY,
    base_url=os.getenv("API_URL", "http://localhost:3000"),
    endpoint_path=os.getenv("ENDPOINT_PATH", "/api/premium-data"),
    chain=os.getenv("CHAIN", "base"),
)

response = asyncio.run(run_once(config))
print("Status:", response.status_code)
