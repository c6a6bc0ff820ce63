"""Contact detail view and its favorite toggle."""

from rolodex.navigation.routing import ActionArgs, LoaderArgs, not_found


async def loader(args: LoaderArgs) -> dict:
    contact = await args.context.get(args.params.get("contactId", ""))
    if contact is None:
        raise not_found()
    return {"contact": contact}


async def action(args: ActionArgs):
    return await args.context.update(
        args.params["contactId"],
        {"favorite": args.form.get("favorite") == "true"},
    )
