"""
Shared page shell, breadcrumb and not-found rendering.
"""
from html import escape
from typing import List, Optional

from catalog.i18n import SUPPORTED_LANGUAGES, t
from catalog.models import BreadcrumbItem

PAGE_SCRIPT = '''<script>
function toggleFavorite(btn, id) {
  const on = btn.dataset.favorite !== 'true';
  btn.dataset.favorite = on ? 'true' : 'false';
  btn.classList.toggle('text-red-500', on);
  btn.classList.toggle('text-white', !on);
}
function shareListing(title) {
  if (navigator.share) {
    navigator.share({ title: title, url: window.location.href }).catch(err => {
      console.error('Error sharing:', err);
    });
  }
}
</script>'''


def with_lang(link: str, lang: str) -> str:
    sep = "&" if "?" in link else "?"
    return f"{link}{sep}lang={lang}"


def render_language_switch(current: str, path: str) -> str:
    links = []
    for lang in SUPPORTED_LANGUAGES:
        cls = "font-semibold underline" if lang == current else "text-slate-500"
        links.append(f'<a class="{cls}" href="{escape(path)}?lang={lang}">{lang.upper()}</a>')
    return '<div class="flex gap-2 text-sm">' + "".join(links) + "</div>"


def render_page(title: str, body: str, lang: str, path: str = "/") -> str:
    """Full HTML document with header, footer and the shared client script."""
    home = with_lang("/", lang)
    return f'''<!doctype html>
<html lang="{lang}" class="h-full">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<title>{escape(title)}</title>
<script src="https://cdn.tailwindcss.com"></script>
<style>.truncate-2{{display:-webkit-box;-webkit-line-clamp:2;-webkit-box-orient:vertical;overflow:hidden}}</style>
</head>
<body class="min-h-screen flex flex-col bg-gray-50 text-slate-900">
<header class="bg-white border-b">
<div class="container mx-auto px-4 py-3 flex items-center justify-between max-w-7xl">
<a href="{home}" class="text-xl font-semibold">Marketplace</a>
{render_language_switch(lang, path)}
</div>
</header>
{body}
<footer class="bg-white border-t mt-8">
<div class="container mx-auto px-4 py-4 max-w-7xl text-sm text-slate-500">© Marketplace</div>
</footer>
{PAGE_SCRIPT}
</body></html>'''


def render_breadcrumb(items: List[BreadcrumbItem], current_page: str, lang: str) -> str:
    parts = ['<nav class="container mx-auto px-4 max-w-7xl pt-4 text-sm text-slate-500" aria-label="breadcrumb">',
             '<ol class="flex flex-wrap items-center gap-1">']
    for item in items:
        if item.link:
            parts.append(f'<li><a class="hover:underline" href="{escape(with_lang(item.link, lang))}">{escape(item.label)}</a></li>')
        else:
            parts.append(f'<li>{escape(item.label)}</li>')
        parts.append('<li aria-hidden="true">/</li>')
    parts.append(f'<li class="text-slate-800 truncate max-w-xs">{escape(current_page)}</li>')
    parts.append('</ol></nav>')
    return "".join(parts)


def render_not_found(lang: str, path: str = "/", message: Optional[str] = None) -> str:
    text = message or t("listing_not_found", lang)
    body = f'''<main class="flex-1 container mx-auto px-4 py-8">
<div class="text-center">{escape(text)}</div>
</main>'''
    return render_page(text, body, lang, path)
