from django.urls import path

from portfolio_backend.analytics.api.views import AnalyticsView
from portfolio_backend.portfolio.api.views import ContactView
from portfolio_backend.portfolio.api.views import SkillCatalogView
from portfolio_backend.realtime import socketio as realtime

analytics_view = AnalyticsView.as_view(
    aggregator=realtime.aggregator,
    registry=realtime.registry,
)
skills_view = SkillCatalogView.as_view()
contact_view = ContactView.as_view()

app_name = "api"
# The frontend calls these without a trailing slash; keep both spellings.
urlpatterns = [
    path("analytics/", analytics_view, name="analytics"),
    path("analytics", analytics_view, name="analytics-noslash"),
    path("portfolio/skills/", skills_view, name="portfolio-skills"),
    path("portfolio/skills", skills_view, name="portfolio-skills-noslash"),
    path("contact/", contact_view, name="contact"),
    path("contact", contact_view, name="contact-noslash"),
]
