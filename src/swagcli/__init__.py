"""swagcli -- Swagger 2 command compilation and page-token pagination for REST CLIs.

A REST CLI host registers two things from this package:

* a document loader (:func:`swagcli.loader.new`) that compiles a Swagger 2
  document into :class:`~swagcli.models.Operation` command descriptors, and
* a link parser (:func:`swagcli.links.new_link_parser`) that turns
  ``total_results``/``next_page_token`` envelopes into ``next`` links and
  unwraps the collection they carry.

Modules:
    models: Pydantic models shared across the entire package.
    extensions: Typed access to ``x-cli-*`` vendor extensions.
    parser: Document decoding, version checks and ``$ref`` resolution.
    compiler: The operation compiler.
    loader: Host-facing loader and path resolver.
    links: Pagination link parser.
    config: Settings resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr discipline for diagnostics.
    app: Inspection CLI.
"""

__version__ = "0.1.0"
