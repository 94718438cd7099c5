"""Admin notices shown at the top of the options page."""

from dataclasses import dataclass
from typing import Literal

NoticeType = Literal["success", "info", "warning", "error"]


@dataclass(frozen=True)
class Notice:
    type: NoticeType
    message: str
    notice_alt: bool = False
    inline: bool = False
    dismissible: bool = True
    force_show: bool = True

    @property
    def css_classes(self) -> str:
        classes = ["notice", f"notice-{self.type}"]
        if self.notice_alt:
            classes.append("notice-alt")
        if self.inline:
            classes.append("inline")
        if self.dismissible:
            classes.append("is-dismissible")
        return " ".join(classes)


def success(message: str) -> Notice:
    return Notice(type="success", message=message)
