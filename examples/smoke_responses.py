from __future__ import annotations

import asyncio
import logging

from localized_response import AsyncConfigManager, MessageTemplateBuilder, ResponseBuilder
from localized_response.config import SettingsLoadRequest, YamlSettingsLoader
from localized_response.logging import init_logging


async def main() -> None:
    settings = await YamlSettingsLoader().load(SettingsLoadRequest(yaml_path="examples/settings.yaml"))
    init_logging(settings.logging)
    logger = logging.getLogger("localized_response.smoke")

    async with AsyncConfigManager.from_settings(settings) as manager:
        manager.add_callback(
            lambda old, new: logger.info("Config changed. templates=%d", len(new.message_templates))
        )
        manager.add_message_template(
            MessageTemplateBuilder("order_created")
            .with_template("Order $id created")
            .with_translation("id", "Pesanan $id dibuat")
            .with_code_mapping("http", 201)
            .build()
        )

        for language in ("en", "id", "es"):
            response = manager.build_response(
                ResponseBuilder("welcome").set_language(language).set_protocol("http").set_param("name", "Jane")
            )
            logger.info("Built response. lang=%s body=%s", language, response.to_json())

        response = manager.build_response(
            ResponseBuilder("order_created").set_language("id").set_protocol("http").set_param("id", 42)
        )
        logger.info("Built response. body=%s", response.to_json())

        await manager.force_refresh()
        manager.print_config()


if __name__ == "__main__":
    asyncio.run(main())
