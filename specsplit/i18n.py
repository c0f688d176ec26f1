"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

import gettext
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Final

SPECSPLIT_NAME: "Final" = "specsplit"


class SpecSplitTranslation:

    translation: gettext.NullTranslations | None = None

    @classmethod
    def get(cls) -> gettext.NullTranslations:
        if not cls.translation:
            cls.translation = gettext.translation(SPECSPLIT_NAME, fallback=True)
        return cls.translation


def translate(msg: str) -> str:
    return SpecSplitTranslation.get().gettext(msg)
