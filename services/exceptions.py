"""Исключения сервисного слоя"""


class AuctionServiceError(Exception):
    """Базовая ошибка сервиса аукционов"""
    pass


class NotFoundError(AuctionServiceError):
    """Запись не найдена по идентификатору или уникальному имени"""
    pass


class CategoryNotFoundError(NotFoundError):
    """Категория товара не найдена"""
    pass


class UserNotFoundError(NotFoundError):
    """Пользователь не найден"""
    pass


class AuctionNotFoundError(NotFoundError):
    """Аукцион не найден"""
    pass


class InvalidPageError(AuctionServiceError, ValueError):
    """Недопустимые offset/limit для постраничной выборки"""
    pass
