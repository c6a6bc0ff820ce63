"""Sidebar: contact list with search, and the "New" button."""

from rolodex.navigation.routing import ActionArgs, LoaderArgs, redirect


async def loader(args: LoaderArgs) -> dict:
    query = args.request.query.get("query", "")
    contacts = await args.context.list(query)
    return {"contacts": contacts, "query": query}


async def action(args: ActionArgs):
    contact = await args.context.create()
    return redirect(f"/contacts/{contact.id}/edit")
