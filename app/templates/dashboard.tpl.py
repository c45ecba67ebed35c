# Dashboard page: shared header, greeting, notification list and counter.
notifications = view.get_var("notifications") or []

view.fetch("header", {"title": "Dashboard"})
echo("<main>\n")
view.print_var("greeting", {"name": view.get_var("user")})
echo("\n<ul>\n")
for note in notifications:
    view.fetch("notification", {"note": note})
echo("</ul>\n")
view.print_var("unread", [len(notifications)])
echo("\n</main>\n")
