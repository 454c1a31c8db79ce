"""Operation compiler -- turn a Swagger 2 document into command descriptors.

Typical usage::

    from swagcli.compiler import compile_document

    api = compile_document(raw_doc, resolver)
    for op in api.operations:
        registry.add(op)

Sub-modules:

* :mod:`~swagcli.compiler.params` -- merge and classify parameters.
* :mod:`~swagcli.compiler.naming` -- command names and aliases.
* :mod:`~swagcli.compiler.schema` -- schema-to-text rendering.
* :mod:`~swagcli.compiler.description` -- response grouping and help text.
* :mod:`~swagcli.compiler.autoconfig` -- the ``x-cli-config`` block.
* :mod:`~swagcli.compiler.operations` -- the document walk.
"""

from swagcli.compiler.operations import Resolver, compile_document, compile_operation

__all__ = ["Resolver", "compile_document", "compile_operation"]
