CLASSIFY_INSTRUCTIONS = (
    "You sort chat requests for a dashboard that renders components in tabs. "
    "Decide whether the user wants the content shown as a table, a graph, or plain text: "
    "'graph' when they ask for a chart, plot or graph; 'table' when they ask for a table, grid or list of rows; "
    "otherwise 'text'.\n\n"
    "Then extract every date/distance pair present in the message, in the order they appear. "
    "Write dates as YYYY-MM-DD when the day and month can be determined, otherwise copy them as written. "
    "Distances are plain numbers without units. "
    "If the message holds no pairs, return an empty list. Never invent values."
)

TEMPLATE_CLASSIFY = CLASSIFY_INSTRUCTIONS
