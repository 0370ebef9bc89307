"""
Run script for the Catalog Admin client.

Logs in with the credentials from the environment, loads the first page of
every admin page and logs out again. Useful to check a backend end to end.
"""

import os
import sys
import asyncio
import logging
from dotenv import load_dotenv

# Load environment variables from .env file before reading settings
env_path = os.path.join(os.path.dirname(__file__), '.env')
if os.path.exists(env_path):
    load_dotenv(env_path)

from catalog_admin.app import AdminApplication  # noqa: E402
from catalog_admin.config import AppSettings  # noqa: E402
from catalog_admin.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger("catalog_admin.startup")


async def check_backend(app: AdminApplication, email: str, password: str) -> bool:
    if not await app.login.submit(email, password):
        for field, message in app.login.field_errors.items():
            logger.error(f"{field}: {message}")
        if app.login.toast.message:
            logger.error(f"Login failed: {app.login.toast.message}")
        return False

    ok = True
    for name, page in (("users", app.users_page),
                       ("products", app.products_page),
                       ("categories", app.categories_page)):
        await page.load()
        if page.error:
            logger.error(f"{name}: {page.error}")
            ok = False
        else:
            logger.info(
                f"{name}: page {page.page}/{page.total_pages}, {page.total_items} total, "
                f"{len(page.items)} shown")

    app.logout()
    return ok


if __name__ == "__main__":
    setup_logging(AppSettings.LOG_LEVEL, AppSettings.LOG_FILE)

    if env_path and not os.path.exists(env_path):
        logger.warning(f"No .env file found at {env_path}, using system environment variables")

    if not AppSettings.validate_settings():
        sys.exit(2)

    email = os.environ.get("ADMIN_EMAIL", "")
    password = os.environ.get("ADMIN_PASSWORD", "")

    logger.info(f"Checking backend at {AppSettings.API_BASE_URL}")
    application = AdminApplication()
    success = asyncio.run(check_backend(application, email, password))
    sys.exit(0 if success else 1)
