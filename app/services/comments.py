import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from markupsafe import Markup, escape

from app.settings import Settings, settings

logger = logging.getLogger(__name__)

UTTERANCES_SRC = "https://utteranc.es/client.js"


@dataclass(frozen=True)
class CommentsConfig:
    repository: str
    theme: str = "dark-blue"
    label: str = "Comment"
    issue_term: str = "pathname"
    src: str = UTTERANCES_SRC

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "CommentsConfig":
        return cls(repository=config.UTTERANC_GITHUB_REPO, theme=config.COMMENTS_THEME)


@dataclass
class ScriptTag:
    attributes: List[Tuple[str, Optional[str]]] = field(default_factory=list)

    def get(self, name: str) -> Optional[str]:
        return next((value for key, value in self.attributes if key == name), None)

    def render(self) -> Markup:
        rendered = []
        for name, value in self.attributes:
            if value is None:
                rendered.append(name)
            else:
                rendered.append(f'{name}="{escape(value)}"')
        return Markup(f"<script {' '.join(rendered)}></script>")


class MountPoint:
    """In-memory stand-in for a DOM element that scripts get appended to."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        self.children: List[ScriptTag] = []

    @property
    def first_child(self) -> Optional[ScriptTag]:
        return self.children[0] if self.children else None

    def append_child(self, child: ScriptTag) -> None:
        self.children.append(child)

    def remove_child(self, child: ScriptTag) -> None:
        self.children.remove(child)

    def render(self) -> Markup:
        inner = "".join(child.render() for child in self.children)
        return Markup(f'<div id="{escape(self.element_id)}">{inner}</div>')


class CommentEmbedController:
    def __init__(self, config: CommentsConfig):
        self.config = config

    def build_script(self) -> ScriptTag:
        return ScriptTag(
            attributes=[
                ("src", self.config.src),
                ("async", None),
                ("repo", self.config.repository),
                ("issue-term", self.config.issue_term),
                ("label", self.config.label),
                ("theme", self.config.theme),
                ("crossorigin", "anonymous"),
            ]
        )

    def attach(self, anchor: Optional[MountPoint]) -> Optional[ScriptTag]:
        if anchor is None:
            logger.debug("Comments anchor not attached yet, skipping mount")
            return None

        existing = next(
            (child for child in anchor.children if self._is_managed(child)), None
        )
        if existing is not None:
            return existing

        script = self.build_script()
        anchor.append_child(script)
        return script

    def detach(self, anchor: Optional[MountPoint]) -> None:
        if anchor is None or anchor.first_child is None:
            return
        anchor.remove_child(anchor.first_child)

    def _is_managed(self, child: ScriptTag) -> bool:
        return child.get("src") == self.config.src
