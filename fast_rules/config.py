import os

from fast_rules.utils.env_utils import env_bool

# Locale used when no locale was set for the current context
LOCALE_DEFAULT = os.getenv("LOCALE_DEFAULT", "en")

# Locale consulted when the current locale has no translation for a key
LOCALE_FALLBACK = os.getenv("LOCALE_FALLBACK", "en")

# Directory holding user translation files (<locale>.json)
LOCALE_PATH = os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang"))

# When disabled, every lookup goes straight to the fallback locale
LOCALIZATION_ENABLED = env_bool("LOCALIZATION_ENABLED", True)

# Root context data key under which an enclosing collection iteration stores the item index
COLLECTION_INDEX_KEY = "__FV_CollectionIndex"
