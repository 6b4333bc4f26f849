"""
Display formatting for search hits.

Each collection stores different fields, so each gets a formatter that reads
the fields it knows about and writes human-readable summaries back into the
hit's source under `Results`, `Results_nonEnglish` and `Results_original`.
Formatters only ever add keys, and every read goes through `field_text`, so a
hit with missing or oddly typed fields still formats.
"""

from typing import Any, Callable, Optional

from ..schema.search import Source

Formatter = Callable[[Source], Source]

RESULTS = "Results"
RESULTS_NON_ENGLISH = "Results_nonEnglish"
RESULTS_ORIGINAL = "Results_original"


def render_value(value: Any) -> Optional[str]:
    """Render a source value as text, or None if it is not a string or a number."""
    if isinstance(value, str):
        return value
    # bool is an int subclass but never a display value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return None


def field_text(source: Source, *names: str) -> str:
    """
    Return the first present field among `names` as text.

    Absent fields, nulls and values that are neither strings nor numbers
    render as an empty string.
    """
    for name in names:
        if name in source and source[name] is not None:
            rendered = render_value(source[name])
            return rendered if rendered is not None else ""
    return ""


def identity_formatter(source: Source) -> Source:
    return source


def format_arabic_poems(source: Source) -> Source:
    title = field_text(source, "title", "Title")
    poet = field_text(source, "poet", "Poet")
    poem = field_text(source, "poem", "Poem")

    source[RESULTS] = (
        f"Title: {title} | Translated: {field_text(source, 'translated_title', 'Translated_Title')}\n"
        f"Poet: {poet} from {field_text(source, 'era', 'Era')}\n"
        f"Translated Text: {field_text(source, 'translated_poem', 'Translated_Poem')}"
    )
    source[RESULTS_NON_ENGLISH] = f"Title: {title}\nPoet: {poet}\n\n{poem}"
    source[RESULTS_ORIGINAL] = f"Title: {title}\n\n{poem}"
    return source


def format_dutch_text(source: Source) -> Source:
    title = field_text(source, "title", "Title")
    raw_text = field_text(source, "text", "Text")

    source[RESULTS] = (
        f"Title: {title}\n\n"
        f"Translated Text:\n{field_text(source, 'translation', 'Translation')}\n\n"
        f"Interpretation:\n{field_text(source, 'interpretation', 'Interpretation')}"
    )
    source[RESULTS_NON_ENGLISH] = f"Title: {title}\n\n{raw_text}"
    source[RESULTS_ORIGINAL] = f"Title: {title}\n\n{raw_text}"
    return source


def format_arabic_books(source: Source) -> Source:
    title = field_text(source, "title", "Title")
    author = field_text(source, "author", "Author")
    date = field_text(source, "date", "Date")
    publisher = field_text(source, "publisher", "Publisher")
    url = field_text(source, "pdf_url", "PDF_URL")

    # The trailing spaces after date and publisher are part of the layout.
    source[RESULTS] = (
        f"Book title: {title} {field_text(source, 'title_transliterated', 'Title_Transliterated')}\n\n"
        f"Author(s):\n\n{author}\n\n"
        f"Date: {date} \n\n"
        f"Publisher: {publisher} \n\n"
        f"Translated page content:\n\n{field_text(source, 'translation', 'Translation')}\n\n"
        f"URL: {url}"
    )
    source[RESULTS_NON_ENGLISH] = (
        f"Book title: {title}\n\n"
        f"Author(s):\n\n{author}\n\n"
        f"Date: {date} \n\n"
        f"Publisher: {publisher} \n\n"
        f"Page content:\n\n{field_text(source, 'full_text', 'Full_Text')}\n\n"
        f"URL: {url}"
    )
    return source


def format_libertarian_chunks(source: Source) -> Source:
    source[RESULTS] = (
        f"Title: {field_text(source, 'title', 'Title')}\n"
        f"Author: {field_text(source, 'author', 'Author')}\n"
        f"Date: {field_text(source, 'date', 'Date')}\n"
        f"Publisher: {field_text(source, 'publisher', 'Publisher')}\n\n"
        f"{field_text(source, 'text', 'Text')}\n\n"
        f"URL: {field_text(source, 'title_url', 'Title_URL')}"
    )
    return source


def format_legal_text(source: Source) -> Source:
    source[RESULTS] = (
        f"Title: {field_text(source, 'title', 'Title')}\n"
        f"URL: {field_text(source, 'url', 'URL')}\n\n"
        f"Explanation:\n{field_text(source, 'explanation', 'Explanation')}\n\n"
        f"Answer 1:\n{field_text(source, 'answer1', 'Answer1')}\n\n"
        f"Answer 2:\n{field_text(source, 'answer2', 'Answer2')}"
    )
    return source


def format_indian_lit(source: Source) -> Source:
    source[RESULTS] = (
        f"Title: {field_text(source, 'title', 'Title')}\n"
        f"Book: {field_text(source, 'book', 'Book')} | Chapter: {field_text(source, 'chapter', 'Chapter')}\n"
        f"Author: {field_text(source, 'author', 'Author')} | Editor: {field_text(source, 'editor', 'Editor')}\n"
        f"Publication: {field_text(source, 'publication', 'Publication')}\n"
        f"Subject: {field_text(source, 'subject', 'Subject')}\n\n"
        f"Paragraph:\n{field_text(source, 'paragraph', 'Paragraph')}\n\n"
        f"Translation:\n{field_text(source, 'translation', 'Translation')}\n\n"
        f"Interpretation:\n{field_text(source, 'interpretation', 'Interpretation')}\n\n"
        f"URL: {field_text(source, 'url', 'URL')}\n"
        f"Tokens: {field_text(source, 'input_token', 'Input_Token')} in / "
        f"{field_text(source, 'output_token', 'Output_Token')} out"
    )
    return source
