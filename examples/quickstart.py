"""Quickstart example for ctxi18n.

This example demonstrates loading a localization document, resolving
strings through nested contexts, language fallback and format templates.

Note: Examples print ParseError messages for brevity. In production, show
them to the translator or maintainer who edits the document.
"""

import tempfile
from pathlib import Path

from ctxi18n import Localizer, ParseError, PathResourceLoader
from ctxi18n.diagnostics import DiagnosticFormatter

DOCUMENT = r"""<?xml version="1.0" encoding="utf-8"?>
<I18N>
  <Entry>
    <Key>Open</Key>
    <Value lang="es">Abrir</Value>
    <Value lang="es-mx">Abrir ahora</Value>
  </Entry>
  <Entry>
    <Key>{0} of {1} files</Key>
    <Value lang="es">{0} de {1} archivos</Value>
  </Entry>
  <Entry>
    <Key>Line one\nLine two</Key>
    <Value lang="es">Primera línea\nSegunda línea</Value>
  </Entry>
  <Context id="status">
    <Entry>
      <Key>Open</Key>
      <Value lang="es">Abierto</Value>
    </Entry>
  </Context>
  <Context id="menu.file">
    <Entry>
      <Key>Save</Key>
      <Value lang="es">Guardar</Value>
    </Entry>
  </Context>
</I18N>
"""

# Example 1: Simple lookup
print("=" * 50)
print("Example 1: Simple Lookup")
print("=" * 50)

localizer = Localizer("es")
localizer.load_string(DOCUMENT)

print(localizer.localize("Open"))
# Output: Abrir

print(localizer.localize("Cancel"))
# Output: Cancel

# Example 2: Contexts
print("\n" + "=" * 50)
print("Example 2: Contexts")
print("=" * 50)

print(localizer.context("status").localize("Open"))
# Output: Abierto

file_menu = localizer.context("menu.file")
print(file_menu.localize(["Save", "Open"]))
# Output: ['Guardar', 'Abrir']

# Example 3: Full and primary language
print("\n" + "=" * 50)
print("Example 3: Language Fallback")
print("=" * 50)

mexico = Localizer("es-MX")
mexico.load_string(DOCUMENT)
print(mexico.localize("Open"))
# Output: Abrir ahora

argentina = Localizer("es-AR")
argentina.load_string(DOCUMENT)
print(argentina.localize("Open"))
# Output: Abrir

# Example 4: Format templates and escapes
print("\n" + "=" * 50)
print("Example 4: Format Templates")
print("=" * 50)

print(localizer.localize_format("{0} of {1} files", 3, 10))
# Output: 3 de 10 archivos

print(localizer.localize("Line one\nLine two"))
# Output: Primera línea
#         Segunda línea

# Example 5: Loading several files
print("\n" + "=" * 50)
print("Example 5: Resource Loading")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    Path(tmpdir, "main.xml").write_text(DOCUMENT, encoding="utf-8")
    summary = Localizer("es").load_resources(
        ["main.xml", "extra.xml"], PathResourceLoader(tmpdir)
    )
    print(summary)
    # Output: LoadSummary(total=2, ok=1, not_found=1, errors=0)

# Example 6: Line-numbered errors
print("\n" + "=" * 50)
print("Example 6: Diagnostics")
print("=" * 50)

broken = """<I18N>
  <Entry>
    <Key>Hello</Key>
    <Value lang="es">Hola</Value>
    <Value lang="es">Buenas</Value>
  </Entry>
</I18N>
"""

try:
    Localizer("es").load_string(broken, source_path="broken.xml")
except ParseError as e:
    print(e)
    # Output: Line 5: Too many child 'Value' XML elements with the same 'lang' attribute
    print(DiagnosticFormatter().format_error(e, source=broken))
    # Output: error[DUPLICATE_VALUE]: Too many child 'Value' XML elements ...
    #           --> broken.xml:5
    #            |
    #          5 |     <Value lang="es">Buenas</Value>
    #            |
