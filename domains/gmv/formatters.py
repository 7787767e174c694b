"""Telegram message texts (HTML parse mode, Indonesian)."""

import html
import math
from datetime import datetime

from .config import ERROR_TRUNCATE
from .types import Snapshot

GREETING = "Halo! Gunakan /status untuk laporan harian, dan /setbudget &lt;angka&gt; untuk ubah budget."
NOT_ALLOWED = "🚫 Kamu tidak diizinkan menjalankan bot ini."
UNKNOWN_COMMAND = "Perintah tidak dikenal. Coba /status atau /setbudget &lt;angka&gt;"
FETCHING = "⏳ Sedang mengambil data campaign…"
SETBUDGET_USAGE = (
    "Format: <code>/setbudget &lt;angka-IDR&gt;</code> "
    "(contoh: <code>/setbudget 175.000</code>)"
)
INVALID_AMOUNT = (
    "Nominal tidak valid. Coba seperti <code>/setbudget 180.000</code> atau <code>200k</code>."
)
BUDGET_UPDATED = "✅ Budget campaign berhasil diperbarui!"


def rupiah(amount: float) -> str:
    """Format as whole Rupiah with dot grouping, e.g. Rp 175.000."""
    rounded = math.floor(amount + 0.5)
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp {abs(rounded):,}".replace(",", ".")


def error_detail(error: BaseException) -> str:
    """Truncated, HTML-safe error text for a <code> block."""
    return html.escape(str(error)[:ERROR_TRUNCATE])


def format_status(ts: datetime, snap: Snapshot, budget: float) -> str:
    """Combined daily report: performance plus current budget."""
    stamp = f"{ts.strftime('%d/%m/%Y, %H.%M.%S')} {ts.tzname() or ''}".strip()
    return "\n".join([
        "✅ <b>Laporan Campaign Harian</b>",
        f"Waktu: <b>{stamp}</b>",
        "----------------",
        "🧮 <b>Performa</b>",
        f"• Total Biaya (Cost): <b>{rupiah(snap.cost)}</b>",
        f"• Total Order: <b>{snap.orders}</b>",
        f"• Biaya per Order: <b>{rupiah(snap.cpo)}</b>",
        f"• Pendapatan Kotor: <b>{rupiah(snap.gross)}</b>",
        f"• ROI: <b>{snap.roi:.2f}%</b>",
        "----------------",
        "⚙️ <b>Pengaturan</b>",
        f"• Budget Harian: <b>{rupiah(budget)}</b>",
    ])


def status_failed(error: BaseException) -> str:
    return f"❌ Gagal mengambil laporan. Coba lagi.\n<code>{error_detail(error)}</code>"


def decrease_not_allowed(current_budget: float) -> str:
    return f"❌ Tidak boleh menurunkan budget dari {rupiah(current_budget)} pada hari yang sama."


def minimum_raise_applied(desired: int, effective: int, spend: float) -> str:
    return (
        f"🧯 Aturan 105% aktif. Budget diangkat dari {rupiah(desired)} → "
        f"<b>{rupiah(effective)}</b> (spend saat ini {rupiah(spend)})."
    )


def applying_budget(effective: int) -> str:
    return f"🧑‍🏭 Mengatur budget campaign menjadi <b>{rupiah(effective)}</b>…"


def set_budget_failed(error: BaseException) -> str:
    return f"❌ Gagal mengatur budget. Pesan: <code>{error_detail(error)}</code>"
