from rolodex.navigation.routing import ActionArgs, redirect


async def action(args: ActionArgs):
    await args.context.delete(args.params["contactId"])
    return redirect("/")
