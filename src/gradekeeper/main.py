import flet as ft

from gradekeeper.config.logging_setup import configure_logging
from gradekeeper.config.settings import settings
from gradekeeper.ui.app import main


def run() -> None:
    logger = configure_logging(settings.log_level)
    logger.info("Starting GradeKeeper (web=%s)", settings.web_mode)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
