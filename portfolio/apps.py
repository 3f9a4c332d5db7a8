from django.apps import AppConfig


class PortfolioConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "portfolio"

    def ready(self):
        from portfolio.models import PortfolioItem
        from portfolio.store import portfolio_publisher

        portfolio_publisher.connect(PortfolioItem)
