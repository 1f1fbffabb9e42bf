# tierlist/main.py

import uvicorn

from tierlist import config
from tierlist.utils.logger import log_info


def main():
    """Entry point: serve the share API with uvicorn."""
    log_info(f"Server starting at http://{config.HOST}:{config.PORT}")
    uvicorn.run(
        "tierlist.main_fastapi:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
