"""Поиск учётных данных сервисных аккаунтов Google."""
