from django.apps import AppConfig


class OffersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "offers"

    def ready(self):
        from offers.models import Offer
        from offers.store import offers_publisher

        offers_publisher.connect(Offer)
