"""Built-in translation bundles."""

from veg24.types import TranslationBundle

TRANSLATIONS: dict[str, TranslationBundle] = {
    "en": {
        "welcome": "Welcome to VEG24 Fresh",
        "products": "Products",
        "add_to_cart": "Add to Cart",
        "daily_fresh": "Daily Fresh",
        "organic": "Organic",
    },
    "hi": {
        "welcome": "VEG24 ताजा में आपका स्वागत है",
        "products": "उत्पाद",
        "add_to_cart": "कार्ट में जोड़ें",
        "daily_fresh": "दैनिक ताजा",
        "organic": "जैविक",
    },
    "kn": {
        "welcome": "VEG24 ಫ್ರೆಶ್ಗೆ ಸ್ವಾಗತ",
        "products": "ಉತ್ಪನ್ನಗಳು",
        "add_to_cart": "ಕಾರ್ಟ್‌ಗೆ ಸೇರಿಸಿ",
        "daily_fresh": "ದೈನಂದಿನ ತಾಜಾ",
        "organic": "ಸಾವಯವ",
    },
    "mr": {
        "welcome": "VEG24 फ्रेश मध्ये आपले स्वागत आहे",
        "products": "उत्पादने",
        "add_to_cart": "कार्टमध्ये जोडा",
        "daily_fresh": "दैनंदिन ताजे",
        "organic": "ऑर्गेनिक",
    },
}

__all__ = ["TRANSLATIONS"]
