"""Edit form. Submitted fields are saved as-is."""

from rolodex.navigation.routing import ActionArgs, LoaderArgs, not_found, redirect


async def loader(args: LoaderArgs) -> dict:
    contact = await args.context.get(args.params.get("contactId", ""))
    if contact is None:
        raise not_found()
    return {"contact": contact}


async def action(args: ActionArgs):
    contact_id = args.params["contactId"]
    await args.context.update(contact_id, dict(args.form))
    return redirect(f"/contacts/{contact_id}")
