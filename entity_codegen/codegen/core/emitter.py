"""
Entity interface emitter.

Turns one entity definition into the lines of a generated interface (Java) or
trait (Scala): header, optional builder stub, accessor declarations and the
from/into copy methods. Names, types, annotations and comment formatting come
from injected services; this module only decides what is printed and in which
order.
"""

from typing import List, Optional

from .schema import EntityDefinition, EmissionMode, SurfaceSyntax
from .services import DocPolicy, EmitterServices
from .writer import CodeWriter

FREEBUILDER_ANNOTATION = "org.inferred.freebuilder.FreeBuilder"

COPY_SECTION_TITLE = "FROM and INTO"


def emit_interface(
    entity: EntityDefinition,
    mode: EmissionMode,
    sink: CodeWriter,
    services: EmitterServices,
) -> None:
    """
    Append the interface for ``entity`` to ``sink``.

    Args:
        entity: Table or UDT to render (read only)
        mode: Setter, fluent-setter and syntax flags for this run
        sink: Destination for the generated lines
        services: Name, type, annotation and documentation collaborators
    """
    names = services.names
    syntax = mode.surface_syntax

    package = names.package_name(entity)
    interface = names.interface_name(entity)
    qualified_interface = names.qualified_interface_name(entity)

    sink.set_package(package)
    sink.declare_local(interface)

    sink.println(render_package(package, syntax))
    sink.println()

    _print_lines(sink, services.docs.entity_doc(entity), depth=0)
    for line in services.annotations.entity_annotations(entity, sink):
        sink.println(line)

    if syntax == SurfaceSyntax.CLASS_BASED:
        sink.println(f"@{sink.ref(FREEBUILDER_ANNOTATION)}")

    supertypes = [sink.ref(name) for name in names.supertypes(entity)]
    sink.println(render_header(interface, supertypes, syntax))

    # Builder stubs only exist for class-based output
    if syntax == SurfaceSyntax.CLASS_BASED:
        sink.println()
        sink.println(
            render_builder(names.builder_name(entity), names.base_builder_name(entity)),
            depth=1,
        )

    setter_return = interface if mode.fluent_setters else void_type(syntax)

    for member in entity.members:
        member_type = sink.ref(services.types.resolve(entity, member))
        subject = f"<code>{member.qualified_name}</code>."

        if not mode.immutable_pojos:
            _emit_doc(sink, services.docs, describe(f"Setter for {subject}", member.comment))
            sink.println(
                render_setter(names.setter_name(member), member_type, setter_return, syntax),
                depth=1,
            )

        _emit_doc(sink, services.docs, describe(f"Getter for {subject}", member.comment))
        for line in services.annotations.member_annotations(entity, member, sink):
            sink.println(line, depth=1)
        sink.println(render_getter(names.getter_name(member), member_type, syntax), depth=1)

    if not mode.immutable_pojos:
        banner = services.docs.section(COPY_SECTION_TITLE)
        if banner:
            sink.println()
            _print_lines(sink, banner, depth=1)

        _emit_doc(
            sink,
            services.docs,
            "Load data from another generated Record/POJO implementing "
            f"the common interface {interface}",
        )
        sink.println(render_from(qualified_interface, syntax), depth=1)

        _emit_doc(
            sink,
            services.docs,
            "Copy data into another generated Record/POJO implementing "
            f"the common interface {interface}",
        )
        sink.println(render_into(qualified_interface, syntax), depth=1)

    services.footer(entity, sink)
    sink.println("}")


def describe(summary: str, comment: Optional[str]) -> str:
    """Join a doc summary with the member comment, skipping blank comments."""
    if comment is None or not comment.strip():
        return summary
    return f"{summary} {comment.strip()}"


def _print_lines(sink: CodeWriter, lines: List[str], depth: int):
    for line in lines:
        sink.println(line, depth=depth)


def _emit_doc(sink: CodeWriter, docs: DocPolicy, text: str, depth: int = 1):
    """Blank separator line followed by the doc comment, if any."""
    sink.println()
    _print_lines(sink, docs.format(text), depth)


# Per-construct renderers, one branch per surface syntax


def void_type(syntax: SurfaceSyntax) -> str:
    if syntax == SurfaceSyntax.TRAIT_BASED:
        return "Unit"
    return "void"


def render_package(package: str, syntax: SurfaceSyntax) -> str:
    if syntax == SurfaceSyntax.TRAIT_BASED:
        return f"package {package}"
    return f"package {package};"


def render_header(interface: str, supertypes: List[str], syntax: SurfaceSyntax) -> str:
    """Interface/trait opening line; no inheritance clause for an empty list."""
    if syntax == SurfaceSyntax.TRAIT_BASED:
        clause = f" extends {' with '.join(supertypes)}" if supertypes else ""
        return f"trait {interface}{clause} {{"

    clause = f" extends {', '.join(supertypes)}" if supertypes else ""
    return f"public interface {interface}{clause} {{"


def render_builder(builder: str, base_builder: str) -> str:
    return f"class {builder} extends {base_builder} {{}}"


def render_setter(setter: str, member_type: str, return_type: str, syntax: SurfaceSyntax) -> str:
    if syntax == SurfaceSyntax.TRAIT_BASED:
        return f"def {setter}(value : {member_type}) : {return_type}"
    return f"public {return_type} {setter}({member_type} value);"


def render_getter(getter: str, member_type: str, syntax: SurfaceSyntax) -> str:
    if syntax == SurfaceSyntax.TRAIT_BASED:
        return f"def {getter} : {member_type}"
    return f"public {member_type} {getter}();"


def render_from(qualified_interface: str, syntax: SurfaceSyntax) -> str:
    if syntax == SurfaceSyntax.TRAIT_BASED:
        return f"def from(from : {qualified_interface}) : Unit"
    return f"public void from({qualified_interface} from);"


def render_into(qualified_interface: str, syntax: SurfaceSyntax) -> str:
    """Bounded generic copy: the result has the caller's concrete type."""
    if syntax == SurfaceSyntax.TRAIT_BASED:
        return f"def into[E <: {qualified_interface}](into : E) : E"
    return f"public <E extends {qualified_interface}> E into(E into);"


__all__ = [
    "emit_interface",
    "describe",
    "void_type",
    "render_package",
    "render_header",
    "render_builder",
    "render_setter",
    "render_getter",
    "render_from",
    "render_into",
]
