from app.models.models import Page, Redirect

__all__ = ["Page", "Redirect"]
