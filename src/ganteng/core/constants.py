"""Default configuration values for ganteng."""

from typing import Final

# Randomized pass probabilities
DEFAULT_SOFTEN_U_PROBABILITY: Final = 0.3
DEFAULT_TILDE_PROBABILITY: Final = 0.5
DEFAULT_EMOJI_PROBABILITY: Final = 0.15
DEFAULT_EMOJI_AFTER_PUNCTUATION_PROBABILITY: Final = 0.5
DEFAULT_EMOJI: Final = "^^"

# Vowel softening word sets
SOFTEN_A_WORDS: Final = (
    "iya",
    "masa",
    "apa",
    "kenapa",
    "gimana",
    "wah",
    "oh",
    "aduh",
    "halo",
    "hai",
    "situ",
    "sini",
)
SOFTEN_U_WORDS: Final = ("kamu", "aku", "itu", "ini")

# Phrases that always close with a period
POLITE_CLOSINGS: Final = ("terima kasih", "maaf", "tolong", "selamat", "permisi")

LAUGHTER_TOKENS: Final = ("wkwk", "hehe", "haha")
TERMINAL_PUNCTUATION: Final = ".?!~…"

# Dictionary sources
DEFAULT_DICTIONARY_RESOURCE: Final = "data/slang.json"
DEFAULT_FETCH_TIMEOUT: Final = 10.0

# User-facing messages
NOT_READY_MESSAGE: Final = "Kamus belum siap. Tunggu sebentar lalu coba lagi."
LOAD_ERROR_MESSAGE: Final = (
    "Gagal memuat kamus. Periksa sumber kamus lalu jalankan ulang."
)
EMPTY_RESULT_MESSAGE: Final = "Tidak ada teks untuk diubah..."
OUTPUT_PLACEHOLDER: Final = "Hasil akan muncul di sini..."

# App config
DEFAULT_CONFIG_DIR: Final = "~/.config/ganteng"
DEFAULT_CONFIG_DIR_ENV: Final = "GANTENG_CONFIG_DIR"
DEFAULT_CONFIG_FILE: Final = "config.json"
