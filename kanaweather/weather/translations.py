"""Furigana readings and English glosses for WeatherAPI.com condition codes.

Labels are the Japanese condition texts the API returns for ``lang=ja``.
Code 1000 has separate day (晴れ) and night (快晴) labels; every other code
has one.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

TOOLTIP_SEPARATOR = "\n\n\n---------------\n"


@dataclass(frozen=True)
class TranslationEntry:
    """Reading aid for one localized condition label.

    Attributes:
        label: Condition text as shown by the provider.
        reading: Kana reading of the label.
        english: English gloss.
        missing: True for the fallback produced on a table miss.
    """

    label: str
    reading: str
    english: str
    missing: bool = False

    def tooltip(self) -> str:
        """Return the tooltip text for this entry."""
        if self.missing:
            return self.reading
        return f"{self.reading}{TOOLTIP_SEPARATOR}({self.english})"


def _entry(label: str, reading: str, english: str) -> tuple[TranslationEntry, ...]:
    return (TranslationEntry(label, reading, english),)


TRANSLATIONS: Mapping[int, tuple[TranslationEntry, ...]] = MappingProxyType({
    1000: (
        TranslationEntry("晴れ", "はれ", "Sunny"),
        TranslationEntry("快晴", "かいせい", "Clear"),
    ),
    1003: _entry("所により曇り", "ところによりくもり", "Partly cloudy"),
    1006: _entry("曇り", "くもり", "Cloudy"),
    1009: _entry("本曇り", "ほんくもり", "Overcast"),
    1030: _entry("もや", "もや", "Mist"),
    1063: _entry("近くで所により雨", "ちかくでところによりあめ", "Patchy rain possible"),
    1066: _entry("近くで所により雪", "ちかくでところによりゆき", "Patchy snow possible"),
    1069: _entry("近くで所によりみぞれ", "ちかくでところによりみぞれ", "Patchy sleet possible"),
    1072: _entry(
        "近くで所により着氷性の霧雨",
        "ちかくでところによりちゃくひょうせいのきりさめ",
        "Patchy freezing drizzle possible",
    ),
    1087: _entry("近くで雷の発生", "ちかくでかみなりのはっせい", "Thundery outbreaks possible"),
    1114: _entry("吹雪", "ふぶき", "Blowing snow"),
    1117: _entry("猛吹雪", "もうふぶき", "Blizzard"),
    1135: _entry("霧", "きり", "Fog"),
    1147: _entry("着氷性の霧", "ちゃくひょうせいのきり", "Freezing fog"),
    1150: _entry("所により霧雨", "ところによりきりさめ", "Patchy light drizzle"),
    1153: _entry("霧雨", "きりさめ", "Light drizzle"),
    1168: _entry("着氷性の霧雨", "ちゃくひょうせいのきりさめ", "Freezing drizzle"),
    1171: _entry("強い着氷性の霧雨", "つよいちゃくひょうせいのきりさめ", "Heavy freezing drizzle"),
    1180: _entry("所により弱い雨", "ところによりよわいあめ", "Patchy light rain"),
    1183: _entry("弱い雨", "よわいあめ", "Light rain"),
    1186: _entry("時々穏やかな雨", "ときどきおだやかなあめ", "Moderate rain at times"),
    1189: _entry("穏やかな雨", "おだやかなあめ", "Moderate rain"),
    1192: _entry("時々大雨", "ときどきおおあめ", "Heavy rain at times"),
    1195: _entry("大雨", "おおあめ", "Heavy rain"),
    1198: _entry("着氷性の弱い雨", "ちゃくひょうせいのよわいあめ", "Light freezing rain"),
    1201: _entry(
        "着氷性の穏やかな雨または大雨",
        "ちゃくひょうせいのおだやかなあめまたはおおあめ",
        "Moderate or heavy freezing rain",
    ),
    1204: _entry("軽いみぞれ", "かるいみぞれ", "Light sleet"),
    1207: _entry("穏やかなまたは強いみぞれ", "おだやかなまたはつよいみぞれ", "Moderate or heavy sleet"),
    1210: _entry("所により小雪", "ところによりこゆき", "Patchy light snow"),
    1213: _entry("小雪", "こゆき", "Light snow"),
    1216: _entry("所により穏やかな雪", "ところによりおだやかなゆき", "Patchy moderate snow"),
    1219: _entry("穏やかな雪", "おだやかなゆき", "Moderate snow"),
    1222: _entry("所により大雪", "ところによりおおゆき", "Patchy heavy snow"),
    1225: _entry("大雪", "おおゆき", "Heavy snow"),
    1237: _entry("凍雨", "とうう", "Ice pellets"),
    1240: _entry("軽いにわか雨", "かるいにわかあめ", "Light rain shower"),
    1243: _entry(
        "穏やかなまたは強いにわか雨",
        "おだやかなまたはつよいにわかあめ",
        "Moderate or heavy rain shower",
    ),
    1246: _entry("急な豪雨", "きゅうなごうう", "Torrential rain shower"),
    1249: _entry("急な軽いみぞれ", "きゅうなかるいみぞれ", "Light sleet showers"),
    1252: _entry(
        "穏やかなまたは強い急なみぞれ",
        "おだやかなまたはつよいきゅうなみぞれ",
        "Moderate or heavy sleet showers",
    ),
    1255: _entry("急な軽い雪", "きゅうなかるいゆき", "Light snow showers"),
    1258: _entry(
        "穏やかなまたは強い急な雪",
        "おだやかなまたはつよいきゅうなゆき",
        "Moderate or heavy snow showers",
    ),
    1261: _entry("軽い急な凍雨", "かるいきゅうなとうう", "Light showers of ice pellets"),
    1264: _entry(
        "穏やかなまたは強い急な凍雨",
        "おだやかなまたはつよいきゅうなとうう",
        "Moderate or heavy showers of ice pellets",
    ),
    1273: _entry(
        "所により雷を伴う弱い雨",
        "ところによりかみなりをともなうよわいあめ",
        "Patchy light rain with thunder",
    ),
    1276: _entry(
        "雷を伴う穏やかなまたは強い雨",
        "かみなりをともなうおだやかなまたはつよいあめ",
        "Moderate or heavy rain with thunder",
    ),
    1279: _entry("雷を伴う軽い雪", "かみなりをともなうかるいゆき", "Patchy light snow with thunder"),
    1282: _entry(
        "雷を伴う穏やかなまたは強い雪",
        "かみなりをともなうおだやかなまたはつよいゆき",
        "Moderate or heavy snow with thunder",
    ),
})

def missing_entry(key: str) -> TranslationEntry:
    """Return the fallback entry for a key absent from the table."""
    return TranslationEntry(
        label=key,
        reading=f"Not found for value {key}",
        english="",
        missing=True,
    )


def translate(code: int, text: str | None = None) -> TranslationEntry:
    """
    Look up the reading for a condition code.

    Args:
        code: Provider condition code.
        text: Condition label as returned by the provider; selects between
            day and night labels sharing one code.

    Returns:
        The matching entry, or a fallback entry naming the condition text
        (or the code when no text is given) if the code is unknown.
    """
    entries = TRANSLATIONS.get(code)
    if not entries:
        return missing_entry(text if text is not None else str(code))
    for entry in entries:
        if entry.label == text:
            return entry
    return entries[0]
