from config import get_settings_module
import importlib

from src.hr_portal.hr_portal.main import create_app

app = create_app()

if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(debug=bool(getattr(settings, "DEBUG", False)))
