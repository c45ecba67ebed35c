echo("<header><h1>")
view.print_var("title")
echo("</h1></header>\n")
