# -*- coding: utf-8 -*-
"""Centralized Translation Manager for the French/Arabic interface."""

from typing import Callable, List, Optional
from PyQt5.QtCore import Qt

from athena.app.config import Config
from athena.services.translations.ar import AR_TRANSLATIONS
from athena.services.translations.fr import FR_TRANSLATIONS
from athena.utils.logger import get_logger

logger = get_logger(__name__)

RTL_LANGUAGES = ("ar",)


class TranslationManager:
    """Singleton Translation Manager with RTL/LTR support."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._translations = {
                "fr": FR_TRANSLATIONS,
                "ar": AR_TRANSLATIONS,
            }
            cls._instance._current_language = cls._instance._normalize(Config.DEFAULT_LANGUAGE)
            cls._instance._listeners: List[Callable] = []
        return cls._instance

    def _normalize(self, lang_code: str) -> str:
        lang_code = (lang_code or "").lower()
        return lang_code if lang_code in self._translations else "fr"

    def on_language_changed(self, callback: Callable):
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def set_language(self, lang_code: str):
        lang_code = self._normalize(lang_code)
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")
            for callback in list(self._listeners):
                try:
                    callback(lang_code)
                except Exception as e:
                    logger.error(f"Language change callback error: {e}")

    def get_language(self) -> str:
        return self._current_language

    def other_language(self) -> str:
        return "ar" if self._current_language == "fr" else "fr"

    def tr(self, key: str, lang: Optional[str] = None, **kwargs) -> str:
        language = self._normalize(lang) if lang else self._current_language
        translation = self._translations.get(language, {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                pass
        return translation

    def is_rtl(self, lang: Optional[str] = None) -> bool:
        return (lang or self._current_language) in RTL_LANGUAGES

    def get_layout_direction(self):
        return Qt.RightToLeft if self.is_rtl() else Qt.LeftToRight


_translator = TranslationManager()


def tr(key: str, lang: Optional[str] = None, **kwargs) -> str:
    return _translator.tr(key, lang=lang, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def is_rtl() -> bool:
    return _translator.is_rtl()


def get_layout_direction():
    return _translator.get_layout_direction()
