"""Точка входа в приложение."""
from image_compressor.app import ImageCompressorApp
from image_compressor.utils.logging_setup import configure_logging
from image_compressor.utils.settings import load_config


def main() -> None:
    """Читает конфиг, настраивает лог, создаёт и запускает главное окно."""
    settings = load_config()
    configure_logging(settings.log_level)
    app = ImageCompressorApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
