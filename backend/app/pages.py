"""Static page content served by the app."""

HOME_TITLE = "How AI is Changing the World"

HOME_HTML = (
    f"<h1>{HOME_TITLE}</h1>"
    "<p>Artificial Intelligence (AI) is transforming every aspect of our lives...</p>"
)
