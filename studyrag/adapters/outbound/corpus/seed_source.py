"""Built-in TYT/AYT study topics used when no corpus is configured."""

from collections.abc import Iterator
from typing import Any

from ....core.ports.corpus_source_port import CorpusSourcePort

SEED_DOCUMENTS: tuple[dict[str, Any], ...] = (
    {
        "title": "TYT Matematik Konuları",
        "content": (
            "TYT Matematik konuları: Sayılar ve İşlemler, Kümeler, Mantık, Fonksiyonlar, "
            "Polinomlar, Denklemler ve Eşitsizlikler, Diziler ve Seriler, Trigonometri, "
            "Analitik Geometri, İstatistik ve Olasılık."
        ),
        "category": "tyt-matematik",
        "tags": ["matematik", "tyt", "sayılar", "fonksiyonlar", "geometri"],
    },
    {
        "title": "TYT Türkçe Konuları",
        "content": (
            "TYT Türkçe konuları: Anlam Bilgisi, Cümle Bilgisi, Anlatım Biçimleri, Paragraf, "
            "Okuma Anlama, Dil Bilgisi, Yazım Kuralları, Noktalama İşaretleri."
        ),
        "category": "tyt-turkce",
        "tags": ["türkçe", "tyt", "dil", "anlam", "cümle", "paragraf"],
    },
    {
        "title": "TYT Fen Bilimleri",
        "content": (
            "TYT Fen Bilimleri konuları: Fizik (Mekanik, Elektrik, Manyetizma, Dalgalar), "
            "Kimya (Atom, Periyodik Sistem, Kimyasal Türler), "
            "Biyoloji (Canlıların Özellikleri, Hücre, Metabolizma)."
        ),
        "category": "tyt-fen",
        "tags": ["fizik", "kimya", "biyoloji", "tyt", "fen", "hücre", "atom"],
    },
    {
        "title": "AYT Matematik",
        "content": (
            "AYT Matematik konuları: Türev, İntegral, Diziler ve Seriler, Trigonometri, "
            "Analitik Geometri, Olasılık, İstatistik, Kompleks Sayılar, Matrisler."
        ),
        "category": "ayt-matematik",
        "tags": ["matematik", "ayt", "türev", "integral", "trigonometri", "analitik"],
    },
    {
        "title": "İngilizce Gramer Konuları",
        "content": (
            "İngilizce gramer konuları: Tenses (Zamanlar), Conditionals (Koşul Cümleleri), "
            "Passive Voice (Edilgen Çatı), Reported Speech (Dolaylı Anlatım), "
            "Modal Verbs (Modal Fiiller), Articles (Artikeller)."
        ),
        "category": "english-grammar",
        "tags": ["english", "grammar", "tenses", "conditionals", "passive", "modal"],
    },
    {
        "title": "Python Temel Konuları",
        "content": (
            "Python temel konuları: Variables (Değişkenler), Data Types (Veri Tipleri), "
            "Operators (Operatörler), Control Flow (Kontrol Akışı), Loops (Döngüler), "
            "Functions (Fonksiyonlar), Classes and Objects (Sınıflar ve Nesneler), "
            "Exception Handling (Hata Yönetimi)."
        ),
        "category": "python-basics",
        "tags": ["python", "programming", "variables", "functions", "loops", "classes"],
    },
    {
        "title": "Sağlık ve Çalışma Tavsiyeleri",
        "content": (
            "Çalışma verimliliği için: Düzenli uyku (7-8 saat), Sağlıklı beslenme, "
            "Düzenli egzersiz, Molalar vermek, Pomodoro tekniği, Not alma teknikleri, "
            "Aktif öğrenme yöntemleri."
        ),
        "category": "health-study",
        "tags": ["sağlık", "çalışma", "uyku", "beslenme", "egzersiz", "pomodoro"],
    },
)


class SeedCorpusSource(CorpusSourcePort):
    """Fixed set of topic documents so the engine works without configuration."""

    name = "seed corpus"

    def load(self) -> Iterator[dict[str, Any]]:
        for document in SEED_DOCUMENTS:
            yield dict(document, tags=list(document["tags"]))
