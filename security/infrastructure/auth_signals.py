# security/infrastructure/auth_signals.py
import logging

from django.contrib.auth.signals import user_logged_in, user_login_failed
from django.dispatch import receiver

logger = logging.getLogger(__name__)


@receiver(user_logged_in)
def log_login(sender, user, request, **kwargs):
    # last_login lo actualiza el receiver propio de django.contrib.auth
    logger.info("Login exitoso: %s", user.email)


@receiver(user_login_failed)
def log_login_failed(sender, credentials, request=None, **kwargs):
    logger.warning("Login fallido: %s", credentials.get("email") or credentials.get("username"))
