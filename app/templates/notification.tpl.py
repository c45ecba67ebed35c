echo("  <li>", view.get_var("note"), "</li>\n")
