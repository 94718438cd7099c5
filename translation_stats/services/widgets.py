"""Sidebar widgets of the options page."""

from dataclasses import dataclass

from translation_stats.utils.links import campaign_link


@dataclass(frozen=True)
class WidgetLink:
    label: str
    url: str


@dataclass(frozen=True)
class AboutWidget:
    """The "about" info box: logo, resources, contact and sponsor links."""

    site_url: str
    version: str
    template: str = "widgets/about.html"
    support_url: str = "https://wordpress.org/support/plugin/translation-stats/"
    sponsor_url: str = "https://github.com/sponsors/pedro-mendonca"

    def _link(self, path: str, campaign: str) -> str:
        return campaign_link(self.site_url.rstrip("/") + path, "tstats", "link", campaign)

    @property
    def logo_url(self) -> str:
        return self._link("", "tstats_plugin_logo")

    @property
    def resources(self) -> list[WidgetLink]:
        return [
            WidgetLink("Site", self._link("", "tstats_link_site")),
            WidgetLink("FAQ", self._link("/faq/", "tstats_link_faq")),
            WidgetLink("Changelog", self._link("/changelog/", "tstats_link_changelog")),
            WidgetLink("Support", self.support_url),
        ]

    @property
    def contact_url(self) -> str:
        return self._link("/contact/", "tstats_link_contact")
