from tree_builder.components import accessor


async def health_check(root: str) -> bool:
    return await accessor.exists(root)
