"""
Centralized constants for the Battle Stats Bot.

Colors, limits and reply templates live here so they can be imported by any
module without circular dependencies.
"""

# =============================================================================
# Database Connection
# =============================================================================

DB_POOL_MIN: int = 1
DB_POOL_MAX: int = 10
DB_CONNECT_TIMEOUT: int = 10
RECORDS_TABLE: str = "records"

# =============================================================================
# Input Limits
# =============================================================================

PLAYER_NAME_MAX_LENGTH: int = 100
ERROR_MSG_TRUNCATE_LENGTH: int = 150

# =============================================================================
# Discord UI
# =============================================================================

# Discord rejects embeds with more than 25 fields, messages with more than
# 10 embeds or 6000 embed characters, and message content over 2000 characters
EMBED_MAX_FIELDS: int = 25
MESSAGE_MAX_EMBEDS: int = 10
MESSAGE_MAX_EMBED_CHARS: int = 6000
MESSAGE_MAX_LENGTH: int = 2000

COLOR_STATS: int = 0x00AE86

STATS_TITLE: str = "📊 戦績一覧"

# =============================================================================
# Reply Messages
# =============================================================================

MSG_ADMIN_ONLY: str = "🚫 管理者のみ実行可能です。"
MSG_NO_DATA: str = "📭 データがありません。"
MSG_RECORD_ADDED: str = "✅ {name} に勝ち: {win} / 負け: {lose} を加算しました"
MSG_GAMES_ADDED: str = "✅ {names} の試合数を1加算しました"
MSG_RECORD_SET: str = "✅ {name} の戦績を設定しました: {win}勝 {lose}敗 {games}試合"
MSG_RECORD_DELETED: str = "🗑️ {name} の戦績を削除しました"

# =============================================================================
# Liveness Endpoint
# =============================================================================

KEEPALIVE_DEFAULT_PORT: int = 3000
KEEPALIVE_BODY: str = "Bot is alive"
