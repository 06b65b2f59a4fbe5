"""Built-in store type schemas.

Each entry pairs a JSON schema for the settings form with ui hints for the
form renderer and display metadata for the add menu.
"""

from .store_registry import StoreTypeInfo


PINECONE = StoreTypeInfo(
    store_type="pinecone",
    display_name="Pinecone",
    emoji="\u2601\uFE0F",
    full_name="Pinecone Vectorstore",
    description="Cloud-based vector database with broad functionality",
    schema={
        "type": "object",
        "required": ["api_key", "environment", "index_name"],
        "properties": {
            "api_key": {"type": "string", "title": "API Key"},
            "environment": {"type": "string", "title": "Environment"},
            "index_name": {"type": "string", "title": "Index Name"},
            "namespace": {"type": "string", "title": "Namespace (Optional)"},
            "metric": {
                "type": "string",
                "title": "Distance Metric",
                "enum": ["cosine", "euclidean", "dotproduct"],
                "default": "cosine",
            },
        },
    },
    ui_schema={
        "api_key": {"ui:widget": "password"},
        "metric": {"ui:widget": "select"},
    },
)

FAISS = StoreTypeInfo(
    store_type="faiss",
    display_name="FAISS",
    emoji="\U0001F4BE",
    full_name="FAISS Vectorstore",
    description="Local disk-based vector database by Facebook AI",
    schema={
        "type": "object",
        "required": ["store_path"],
        "properties": {
            "store_path": {
                "type": "string",
                "title": "Store Path",
                "description": "Path to save/load the FAISS index",
            },
            "dimension": {"type": "number", "title": "Vector Dimension", "default": 1536},
            "metric": {
                "type": "string",
                "title": "Distance Metric",
                "enum": ["l2", "inner_product", "cosine"],
                "default": "cosine",
            },
        },
    },
    ui_schema={
        "metric": {"ui:widget": "select"},
        "dimension": {
            "ui:widget": "range",
            "ui:options": {"min": 64, "max": 4096, "step": 64},
        },
    },
)

DOCS = StoreTypeInfo(
    store_type="docs",
    display_name="Docs",
    emoji="\U0001F4C4",
    full_name="Documents",
    description="Non-vectorized document collection",
    schema={
        "type": "object",
        "required": [],
        "properties": {
            "method": {
                "type": "string",
                "title": "Retrieval method",
                "enum": ["TF-IDF", "Boolean Search", "Keyword Overlap"],
                "default": "TF-IDF",
            },
        },
    },
    ui_schema={"method": {"ui:widget": "select"}},
)

# Menu order
BUILTIN_STORE_TYPES = (PINECONE, FAISS, DOCS)
