from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from world_explorer_app import create_app

app = create_app()

if __name__ == '__main__':
    import os
    import sys
    import asyncio

    if sys.platform == 'win32':
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    port = int(os.environ.get('PORT', 5000))
    app.logger.info("Starting World Explorer on port %d", port)
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
