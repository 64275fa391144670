# -*- coding: utf-8 -*-
"""
Localize - Language Selector

Seleção do idioma ativo: lista idiomas disponíveis, lê e define o idioma
atual (persistido entre execuções), calcula o idioma padrão e notifica
observadores quando a seleção muda.

License: GPL-3.0
"""

from typing import Callable, List, Optional
from loguru import logger

from .catalog import BASE_LOCALIZATION


# Chave sob a qual o idioma selecionado é persistido
CURRENT_LANGUAGE_KEY = 'current_language'

# Idioma usado quando o preferido do sistema não está disponível
DEFAULT_LANGUAGE = 'en'

# Nome do evento de troca de idioma
LANGUAGE_CHANGE_NOTIFICATION = 'LanguageChangeNotification'


class Subscription:
    """Inscrição de um observador; cancel() remove o observador."""

    def __init__(self, selector: 'LanguageSelector', callback: Callable[[], None]):
        self._selector = selector
        self.callback = callback

    @property
    def active(self) -> bool:
        return self in self._selector._subscriptions

    def cancel(self):
        self._selector.unsubscribe(self)

    def __repr__(self):
        return f"<Subscription {self.callback!r} active={self.active}>"


class LanguageSelector:
    """Seletor do idioma ativo.

    A seleção não é mantida em memória: cada leitura consulta o armazenamento
    de preferências. A validação contra os idiomas disponíveis acontece apenas
    na escrita; a leitura devolve o valor persistido como está.
    """

    def __init__(self, catalog, store, negotiator, display_names=None,
                 fallback_language: str = DEFAULT_LANGUAGE):
        """Inicializa o seletor.

        Args:
            catalog: Catálogo de recursos (localizations())
            store: Armazenamento de preferências (get/set/synchronize)
            negotiator: Negociador de idiomas preferidos (preferred_localizations())
            display_names: Serviço de nomes de idiomas (display_name())
            fallback_language: Idioma usado quando o preferido não está disponível
        """
        self.catalog = catalog
        self.store = store
        self.negotiator = negotiator
        self.display_names = display_names
        self.fallback_language = fallback_language
        self._subscriptions: List[Subscription] = []

    def available_languages(self, exclude_base: bool = False) -> List[str]:
        """Lista os idiomas disponíveis.

        Args:
            exclude_base: Remove a localização 'Base' da lista

        Returns:
            Lista de identificadores, na ordem do catálogo
        """
        languages = list(self.catalog.localizations())
        if exclude_base and BASE_LOCALIZATION in languages:
            languages.remove(BASE_LOCALIZATION)
        return languages

    @property
    def current_language(self) -> str:
        """Idioma atual: o valor persistido ou o idioma padrão."""
        language = self.store.get(CURRENT_LANGUAGE_KEY)
        if language is not None:
            return language
        return self.default_language

    def set_current_language(self, language: str):
        """Define o idioma atual.

        Idiomas indisponíveis são trocados pelo idioma padrão. Nada é gravado
        (nem notificado) se o idioma resultante já for o atual.

        Args:
            language: Idioma desejado
        """
        if language in self.available_languages():
            selected = language
        else:
            selected = self.default_language
            logger.warning(f"Idioma indisponível: {language!r}. Usando idioma padrão: {selected}")

        previous = self.current_language
        if selected == previous:
            return

        self.store.set(CURRENT_LANGUAGE_KEY, selected)
        self.store.synchronize()
        logger.info(f"Idioma alterado: {previous} -> {selected}")
        self._notify()

    @property
    def default_language(self) -> str:
        """Idioma padrão: o primeiro preferido do sistema, se disponível."""
        available = self.available_languages()
        preferred = self.negotiator.preferred_localizations(
            [language for language in available if language != BASE_LOCALIZATION]
        )
        if not preferred:
            return self.fallback_language

        if preferred[0] in available:
            return preferred[0]
        return self.fallback_language

    def reset_current_language_to_default(self):
        """Volta o idioma atual para o idioma padrão."""
        self.set_current_language(self.default_language)

    def display_name_for_language(self, language: str) -> str:
        """Nome de um idioma escrito no idioma atual.

        Args:
            language: Idioma desejado

        Returns:
            Nome legível ou string vazia se não puder ser resolvido
        """
        if self.display_names is None:
            return ''

        try:
            name = self.display_names.display_name(language, self.current_language)
        except Exception as e:
            logger.error(f"Erro ao obter nome do idioma {language!r}: {e}")
            return ''

        return name or ''

    def subscribe(self, callback: Callable[[], None]) -> Subscription:
        """Registra um observador para trocas de idioma.

        Args:
            callback: Chamado sem argumentos após cada troca

        Returns:
            Inscrição que pode ser cancelada
        """
        if not callable(callback):
            raise TypeError(f"Observador precisa ser chamável: {callback!r}")

        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Optional[Subscription]):
        """Remove um observador. Remover duas vezes não tem efeito."""
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass

    def _notify(self):
        logger.debug(f"{LANGUAGE_CHANGE_NOTIFICATION}: {len(self._subscriptions)} observador(es)")
        # Cópia: observadores podem cancelar a própria inscrição
        for subscription in list(self._subscriptions):
            try:
                subscription.callback()
            except Exception:
                logger.exception(f"Erro em observador de {LANGUAGE_CHANGE_NOTIFICATION}")
