import unittest

from localized_response.core import MessageTemplate, MessageTemplateBuilder, ResponseConfig


def _welcome_config() -> ResponseConfig:
    return ResponseConfig(
        default_language="en",
        languages=["en", "id"],
        translations={
            "en": {"greeting": "Hello"},
            "id": {"greeting": "Halo"},
        },
        message_templates={
            "welcome": MessageTemplate(
                key="welcome",
                template="Welcome $name",
                code_mappings={"http": 200},
                translations={"en": "Welcome $name", "id": "Selamat datang $name"},
            ),
            "plain": MessageTemplate(key="plain", template="Plain $thing"),
        },
    )


class TemplateResolutionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = _welcome_config()

    def test_loaded_template_found(self) -> None:
        template = self.config.get_message_template("welcome")
        self.assertIsNotNone(template)
        self.assertEqual(template.code_mappings["http"], 200)

    def test_missing_template_not_found(self) -> None:
        self.assertIsNone(self.config.get_message_template("nope"))

    def test_manual_template_takes_priority(self) -> None:
        manual = MessageTemplate(key="welcome", template="HELLO $name")
        self.config.add_message_template(manual)
        self.assertIs(self.config.get_message_template("welcome"), manual)
        self.assertEqual(self.config.message_templates["welcome"].template, "Welcome $name")

    def test_exact_language_translation(self) -> None:
        self.assertEqual(self.config.get_message_template_translation("welcome", "id"), "Selamat datang $name")

    def test_unknown_language_falls_back_to_default_language(self) -> None:
        self.assertEqual(self.config.get_message_template_translation("welcome", "es"), "Welcome $name")
        self.assertEqual(
            self.config.get_message_template_translation_with_fallback("welcome", "es"),
            "Welcome $name",
        )

    def test_template_without_translations_falls_back_to_template_text(self) -> None:
        self.assertEqual(self.config.get_message_template_translation("plain", "id"), "Plain $thing")

    def test_missing_template_translation_falls_back_to_key(self) -> None:
        self.assertIsNone(self.config.get_message_template_translation("nope", "en"))
        self.assertEqual(self.config.get_message_template_translation_with_fallback("nope", "en"), "nope")

    def test_manual_entry_shadows_loaded_translations(self) -> None:
        self.config.add_message_template(MessageTemplate(key="welcome", template="HELLO $name"))
        self.assertEqual(
            self.config.get_message_template_translation_with_fallback("welcome", "en"),
            "HELLO $name",
        )
        self.assertEqual(
            self.config.get_message_template_translation_with_fallback("welcome", "id"),
            "HELLO $name",
        )

    def test_key_present_only_in_default_language(self) -> None:
        self.config.add_message_template(
            MessageTemplate(key="bye", template="raw", translations={"en": "Goodbye"})
        )
        for lang in ("en", "id", "fr", ""):
            self.assertEqual(self.config.get_message_template_translation_with_fallback("bye", lang), "Goodbye")


class TranslationResolutionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = _welcome_config()

    def test_flat_lookup_has_no_fallback(self) -> None:
        self.assertEqual(self.config.get_translation("id", "greeting"), "Halo")
        self.assertIsNone(self.config.get_translation("es", "greeting"))
        self.assertIsNone(self.config.get_translation("en", "missing"))

    def test_fallback_to_default_language_then_key(self) -> None:
        self.assertEqual(self.config.get_translation_with_fallback("id", "greeting"), "Halo")
        self.assertEqual(self.config.get_translation_with_fallback("es", "greeting"), "Hello")
        self.assertEqual(self.config.get_translation_with_fallback("es", "missing"), "missing")

    def test_languages(self) -> None:
        self.assertEqual(self.config.get_supported_languages(), ["en", "id"])
        self.assertEqual(self.config.get_default_language(), "en")


class ManualTierMutationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.config = _welcome_config()

    def test_add_many_later_duplicate_wins(self) -> None:
        first = MessageTemplate(key="dup", template="first")
        second = MessageTemplate(key="dup", template="second")
        other = MessageTemplate(key="other", template="other")
        self.config.add_message_templates(first, other, second)
        self.assertIs(self.config.get_message_template("dup"), second)
        self.assertIs(self.config.get_message_template("other"), other)

    def test_remove_only_touches_manual_tier(self) -> None:
        self.config.add_message_template(MessageTemplate(key="welcome", template="HELLO $name"))
        self.config.remove_message_template("welcome")
        self.assertEqual(self.config.get_message_template("welcome").template, "Welcome $name")

        self.config.remove_message_template("welcome")
        self.config.remove_message_template("never-added")
        self.assertIn("welcome", self.config.message_templates)

    def test_update_behaves_like_add(self) -> None:
        self.config.update_message_template(MessageTemplate(key="fresh", template="new"))
        self.assertEqual(self.config.get_message_template("fresh").template, "new")

    def test_inherit_manual_templates_copies_overlay(self) -> None:
        self.config.add_message_template(MessageTemplate(key="manual", template="m"))
        refreshed = _welcome_config()
        refreshed.inherit_manual_templates(self.config)
        self.assertEqual(refreshed.get_message_template("manual").template, "m")

        refreshed.remove_message_template("manual")
        self.assertIsNotNone(self.config.get_message_template("manual"))

    def test_merged_templates_prefer_manual(self) -> None:
        self.config.add_message_template(MessageTemplate(key="welcome", template="HELLO"))
        merged = self.config.merged_message_templates()
        self.assertEqual(merged["welcome"].template, "HELLO")
        self.assertEqual(merged["plain"].template, "Plain $thing")


class MessageTemplateBuilderTests(unittest.TestCase):
    def test_build(self) -> None:
        template = (
            MessageTemplateBuilder("order_created")
            .with_template("Order $id created")
            .with_translation("id", "Pesanan $id dibuat")
            .with_translations({"fr": "Commande $id créée"})
            .with_code_mapping("http", 201)
            .with_code_mappings({"grpc": 0})
            .build()
        )
        self.assertEqual(template.key, "order_created")
        self.assertEqual(template.template, "Order $id created")
        self.assertEqual(template.translations, {"id": "Pesanan $id dibuat", "fr": "Commande $id créée"})
        self.assertEqual(template.code_mappings, {"http": 201, "grpc": 0})


if __name__ == "__main__":
    unittest.main()
