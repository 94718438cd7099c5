"""WordPress.org locales that translation stats can be shown for.

Subset of the wordpress.org locales list, keyed by WordPress locale code.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Locale:
    wp_locale: str
    english_name: str
    native_name: str
    slug: str


LOCALES: tuple[Locale, ...] = (
    Locale("ar", "Arabic", "العربية", "ar"),
    Locale("bg_BG", "Bulgarian", "Български", "bg"),
    Locale("ca", "Catalan", "Català", "ca"),
    Locale("cs_CZ", "Czech", "Čeština", "cs"),
    Locale("da_DK", "Danish", "Dansk", "da"),
    Locale("de_DE", "German", "Deutsch", "de"),
    Locale("el", "Greek", "Ελληνικά", "el"),
    Locale("en_AU", "English (Australia)", "English (Australia)", "en-au"),
    Locale("en_CA", "English (Canada)", "English (Canada)", "en-ca"),
    Locale("en_GB", "English (UK)", "English (UK)", "en-gb"),
    Locale("es_ES", "Spanish (Spain)", "Español", "es"),
    Locale("es_MX", "Spanish (Mexico)", "Español de México", "es-mx"),
    Locale("fa_IR", "Persian", "فارسی", "fa"),
    Locale("fi", "Finnish", "Suomi", "fi"),
    Locale("fr_FR", "French (France)", "Français", "fr"),
    Locale("gl_ES", "Galician", "Galego", "gl"),
    Locale("he_IL", "Hebrew", "עִבְרִית", "he"),
    Locale("hu_HU", "Hungarian", "Magyar", "hu"),
    Locale("id_ID", "Indonesian", "Bahasa Indonesia", "id"),
    Locale("it_IT", "Italian", "Italiano", "it"),
    Locale("ja", "Japanese", "日本語", "ja"),
    Locale("ko_KR", "Korean", "한국어", "ko"),
    Locale("nb_NO", "Norwegian (Bokmål)", "Norsk bokmål", "nb"),
    Locale("nl_NL", "Dutch", "Nederlands", "nl"),
    Locale("pl_PL", "Polish", "Polski", "pl"),
    Locale("pt_BR", "Portuguese (Brazil)", "Português do Brasil", "pt-br"),
    Locale("pt_PT", "Portuguese (Portugal)", "Português", "pt"),
    Locale("ro_RO", "Romanian", "Română", "ro"),
    Locale("ru_RU", "Russian", "Русский", "ru"),
    Locale("sk_SK", "Slovak", "Slovenčina", "sk"),
    Locale("sr_RS", "Serbian", "Српски језик", "sr"),
    Locale("sv_SE", "Swedish", "Svenska", "sv"),
    Locale("th", "Thai", "ไทย", "th"),
    Locale("tr_TR", "Turkish", "Türkçe", "tr"),
    Locale("uk", "Ukrainian", "Українська", "uk"),
    Locale("vi", "Vietnamese", "Tiếng Việt", "vi"),
    Locale("zh_CN", "Chinese (China)", "简体中文", "zh-cn"),
    Locale("zh_TW", "Chinese (Taiwan)", "繁體中文", "zh-tw"),
)

_BY_WP_LOCALE = {locale.wp_locale: locale for locale in LOCALES}


def get_locale(wp_locale: str) -> Locale | None:
    return _BY_WP_LOCALE.get(wp_locale)
