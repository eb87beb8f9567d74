"""Глобальный обработчик ошибок"""
import logging
from aiogram import Router
from aiogram.types import ErrorEvent

logger = logging.getLogger(__name__)

router = Router()

# Подробности ошибки пользователю не показываются
ERROR_NOTICE = "Произошла ошибка. Подробности в логах."


@router.errors()
async def handle_error(event: ErrorEvent) -> bool:
    """Записать ошибку в лог и показать пользователю общее уведомление"""
    logger.error(f"Необработанная ошибка при обработке update {event.update.update_id}")
    logger.error(f"{type(event.exception).__name__}: {event.exception}")

    update = event.update
    if update.callback_query is not None:
        await update.callback_query.answer(ERROR_NOTICE, show_alert=True)
    elif update.message is not None:
        await update.message.answer(ERROR_NOTICE)

    return True
