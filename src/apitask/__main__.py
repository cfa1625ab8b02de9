import asyncio

import httpx

from .config import get_settings
from .driver import Driver
from .http.httpx import HTTPX
from .log import configure_logging


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    async with httpx.AsyncClient() as client:
        driver = Driver.from_settings(HTTPX(client), settings)
        await driver.smoke_check()
        for title, panel in await driver.run_all():
            print(f"== {title}\n{panel}\n")


if __name__ == "__main__":
    asyncio.run(main())
