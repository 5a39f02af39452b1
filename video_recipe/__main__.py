# python -m video_recipe  (ou o script video-recipe)
from __future__ import annotations

import uvicorn

from video_recipe.app.config import settings


def main() -> None:
    uvicorn.run(
        "video_recipe.app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == "local",
        log_level="info",
    )


if __name__ == "__main__":
    main()
