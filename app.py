import asyncio
import os
from aiohttp import web

from fixitpapa import create_app

PORT = int(os.environ.get("PORT", 8000))


async def main():
    app = create_app()
    runner = web.AppRunner(app)
    try:
        await app.data_layer.init()
        app.logger.info(f"======= Serving on http://localhost:{PORT}/ ======")
        await runner.setup()
        site = web.TCPSite(runner, '0.0.0.0', PORT)
        await site.start()
        await asyncio.Event().wait()

    finally:
        await runner.cleanup()
        await app.data_layer.close()
        app.logger.info("Shutting down, goodbye")


if __name__ == '__main__':
    asyncio.run(main())
