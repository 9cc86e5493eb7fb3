# /models.py
from pydantic import BaseModel, ConfigDict


# ----------------------------
# Data models
# ----------------------------

class Entry(BaseModel):
    # One titled SQL example. Identity is (module, title).
    model_config = ConfigDict(frozen=True)

    module: int  # 0 = preamble (cheat sheet), 1..N = course modules
    title: str
    category: str  # slug, e.g. "window-functions"
    code: str = ""  # empty for comment-only notes
    comment: str = ""
    line: int = 0  # 1-based line of the title in the source

    @property
    def key(self) -> tuple:
        return (self.module, self.title)


class ModuleInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    line: int = 0


class ModuleSummary(BaseModel):
    # Listing row used by `list-modules` and GET /api/modules
    number: int
    title: str
    entries: int


class CategorySummary(BaseModel):
    category: str
    entries: int
