# SPDX-License-Identifier: MIT
"""F# source generator for .resx resources.

Generates a module with one accessor per resource entry. Depending on the
item settings the accessor is a runtime lookup through a ResourceManager
or a binding to the resource name itself.

Example output:
    // <auto-generated>

    namespace FSharp.Compiler

    open System.Reflection

    module internal SR =
        type private C (_dummy:System.Int32) = class end
        let mutable Culture = System.Globalization.CultureInfo.CurrentUICulture
        let ResourceManager = new System.Resources.ResourceManager("FSComp", ...)
        let GetString(name:System.String) : System.String = ...

        /// <summary>Hello, world</summary>
        let Greeting() = GetString("Greeting")

Usage:
    generator = FSharpSourceGenerator()
    result = generator.generate(request)
    # Creates <output_dir>/<resx stem>.fs
"""

from __future__ import annotations

import re
from xml.sax.saxutils import escape

from resxgen.core.request import GenerationRequest
from resxgen.core.resource import ResourceEntry, load_entries
from resxgen.generators.generator import BaseGenerator

BOILERPLATE = """\
// <auto-generated>

namespace {namespace}

open System.Reflection

module internal {module} =
    type private C (_dummy:System.Int32) = class end
    let mutable Culture = System.Globalization.CultureInfo.CurrentUICulture
    let ResourceManager = new System.Resources.ResourceManager("{base_name}", C(0).GetType().GetTypeInfo().Assembly)
    let GetString(name:System.String) : System.String = ResourceManager.GetString(name, Culture)"""

BOILERPLATE_GET_OBJECT = (
    "    let GetObject(name:System.String) : System.Object = "
    "ResourceManager.GetObject(name, Culture)"
)

INDENT = "    "

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def render_header(namespace: str, module: str, base_name: str, get_object: bool) -> str:
    """Render the module header, ending with a newline."""
    text = BOILERPLATE.format(namespace=namespace, module=module, base_name=base_name) + "\n"
    if get_object:
        text += BOILERPLATE_GET_OBJECT + "\n"
    return text


def render_doc_comment(value: str) -> str:
    """Render a value as an XML doc comment, one ``///`` line per value line."""
    summary = f"<summary>{escape(value)}</summary>"
    return "".join(f"{INDENT}/// {line}\n" for line in _LINE_BREAK.split(summary))


def render_accessor(
    entry: ResourceEntry,
    *,
    legacy: bool,
    literals: bool,
    get_object: bool,
) -> str:
    """Render the accessor declaration for one entry, without trailing newline.

    Returns an empty string for typed entries the target can't look up.
    """
    ident = entry.identifier
    if legacy:
        binding = f'{INDENT}let {ident} = "{entry.name}"'
        if literals:
            return f"{INDENT}[<Literal>]\n{binding}"
        # [<Literal>] can't be used when building FSharp.Core itself
        return binding
    if entry.is_string:
        return f'{INDENT}let {ident}() = GetString("{entry.name}")'
    if get_object:
        # TODO: parse the type attribute to give GetObject accessors a proper return type
        return f'{INDENT}let {ident}() = GetObject("{entry.name}")'
    return ""


def render_entry(
    entry: ResourceEntry,
    *,
    legacy: bool,
    literals: bool,
    get_object: bool,
) -> str:
    """Blank line, doc comment and accessor for one entry."""
    accessor = render_accessor(entry, legacy=legacy, literals=literals, get_object=get_object)
    return "\n" + render_doc_comment(entry.value) + accessor + "\n"


def render_source(request: GenerationRequest, entries: list[ResourceEntry]) -> str:
    """Render the complete source file for a request."""
    get_object = request.generate_get_object
    parts = [render_header(request.namespace, request.module, request.base_name, get_object)]
    for entry in entries:
        parts.append(
            render_entry(
                entry,
                legacy=request.generate_legacy_code,
                literals=request.generate_literals,
                get_object=get_object,
            )
        )
    return "".join(parts)


class FSharpSourceGenerator(BaseGenerator):
    """Generator producing an F# module of resource accessors."""

    extension = ".fs"

    def __init__(self) -> None:
        super().__init__("fsharp")

    def render(self, request: GenerationRequest) -> str:
        return render_source(request, load_entries(request.resource_path))
