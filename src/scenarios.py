"""
Scenario material shared by the demos: the people, the company and the
conference the agents write about.
"""

COMPANY_DESCRIPTION = (
    "A Zurich-based IT Services Consultancy specializing in cloud solutions, cybersecurity, "
    "and software development. Known for its innovative approach, high-quality service, "
    "and collaborative environment."
)

WORKER_PROFILE = (
    "Sheila is a Senior Software Developer with 7 years of experience at the company. "
    "She is known for her strong technical skills, attention to detail, and passion for "
    "continuous learning. Sheila is proactive and values professional development "
    "opportunities, particularly those that keep her at the cutting edge of technology."
)

TEAM_LEAD_PROFILE = (
    "John is a seasoned IT Team Lead with 12 years of experience. He is pragmatic, "
    "risk-averse, and focused on efficiency. John values ROI and tends to be skeptical "
    "about non-essential expenditures. He is known for his high standards and can be hard "
    "to convince without solid evidence or a clear benefit to the team and company."
)

CONFERENCE_SUMMARY = """.NET Day Switzerland is an independent technology conference taking place on Tuesday, 27.08.2024, at Arena Cinemas in Sihlcity, Zürich. It is designed for developers, architects, and experts to explore and discuss .NET technologies, including .NET, .NET Core, C#, ASP.NET Core, Azure, and more. The event features experienced speakers who provide deep insights into the latest Microsoft software development topics and beyond. In addition to technical talks, the conference offers opportunities for networking and discussions with speakers and other attendees.

The conference is a non-profit community event, with all speakers and staff participating voluntarily to support the Swiss .NET community. Any surplus from ticket sales is donated to charity projects or to support the Swiss software developer community.

The agenda includes a mix of introductory, intermediate, and advanced sessions, covering topics such as AI-driven software development, .NET MAUI, distributed systems, minimal APIs, and modern C# features. With sessions led by industry experts like Maddy Montaquila from Microsoft and Jose Luis Latorre Millas, a Microsoft MVP, the conference is an excellent opportunity for professional growth and networking.

The event is not just about learning but also about engaging with the community, with opportunities to connect with peers during breaks and networking sessions."""

# (title, time slot, level, room, speaker)
CONFERENCE_AGENDA = [
    ("It's not your dad's .NET anymore", "08:30 - 09:40", None, "CINEMA 3",
     "Maddy Montaquila, Senior Product Manager, .NET MAUI at Microsoft"),
    ("Agentic AI: Unleash Your AI Potential with AutoGen", "10:10 - 10:55", "Intermediate", "CINEMA 3",
     "Jose Luis Latorre Millas, Microsoft MVP & International Speaker"),
    ("Be Sharp with New Features in C#", "10:10 - 10:55", "Intermediate", "CINEMA 2",
     "Roland Guijt, Microsoft MVP, Pluralsight author, ASP.NET insider"),
    ("Let's turn your website into a hybrid .NET MAUI app", "10:10 - 10:55", "Intermediate", "CINEMA 6",
     "Mark Allibone, Technical Lead at Rey Technology, Microsoft MVP"),
    ("Evolutionary Architecture: The What. The Why. The How.", "10:10 - 10:55", "Intermediate", "CINEMA 8",
     "Maciej 'MJ' Jedrzejewski, Fractional architect, consultant, advisor"),
    ("Making the best out of AI in your daily working life", "11:05 - 11:50", "Intermediate", "CINEMA 3",
     "Laurent Bugnion, Microsoft Cloud Developer Advocate"),
    ("100% Unit Test Coverage and beyond", "11:05 - 11:50", "Advanced", "CINEMA 2",
     "Marc Sallin, Solution Architect at Swiss Post"),
    ("Web/App/Desktop mit Blazor – One to rule them all!", "11:05 - 11:50", "Intermediate", "CINEMA 6",
     "Christian Giesswein, CEO"),
    ("Five common mistakes with distributed systems", "11:05 - 11:50", "Intermediate", "CINEMA 8",
     "Adam Ralph, Distributed systems expert at Particular Software, Microsoft MVP"),
    ("AI-driven Software Development with Azure AI", "12:50 - 13:35", "Introductory", "CINEMA 2",
     "Jörg Neumann, NeoGeeks GmbH"),
    ("Building minimal APIs from scratch", "12:50 - 13:35", "Intermediate", "CINEMA 6",
     "Safia Abdalla, Software Engineer on the ASP.NET Core team"),
    ("Backend for Frontend (BFF) as a Gateway to the World of Microservices", "12:50 - 13:35",
     "Intermediate", "CINEMA 8", "Daniel Murrmann, .NET Developer, fancy Development"),
    ("Implementing the planet's largest e-commerce site using service boundaries", "12:50 - 13:35",
     "Expert", "CINEMA 3", "Dennis van der Stelt, Distributed Systems addict"),
    ("Experience new ways to code with C# and AI", "13:45 - 14:30", "Intermediate", "CINEMA 3",
     "Rachel Appel, Developer Advocate at JetBrains"),
    ("From Task.Run to Task.WhenAll: The Good, The Bad, and The Async", "13:45 - 14:30",
     "Intermediate", "CINEMA 2", "Steven Giesel, Microsoft MVP / .NET Software Engineer"),
    ("Real-Time Connected Apps with .NET MAUI, Blazor and SignalR", "13:45 - 14:30",
     "Intermediate", "CINEMA 6", "Gerald Versluis, Senior Software Engineer at Microsoft"),
    ("Onion, Hexagonal, Clean or Fractal Architecture? All of them, and more!!", "13:45 - 14:30",
     "Intermediate", "CINEMA 8", "Urs Enzler, Software Architect @ Calitime AG"),
    ("Sitting in meetings all day long: My first 180 days as a new Software Engineering Manager",
     "15:00 - 15:45", "Introductory", "CINEMA 3",
     "Dennis Dietrich, Manager Software Development ICS, Phoenix Contact"),
    ("Mastering Integration Testing for .NET Web APIs with WebApplicationFactory and TestContainers",
     "15:00 - 15:45", "Advanced", "CINEMA 2", "Marc Rufer, Senior Software Engineer @isolutions | Microsoft MVP"),
    ("Demystify cloud-native development with .NET Aspire", "15:00 - 15:45", "Intermediate", "CINEMA 6",
     "Maddy Montaquila, Senior Product Manager, .NET MAUI at Microsoft"),
    ("Curious Code and where to find it", "15:00 - 15:45", "Introductory", "CINEMA 8",
     "Alexander Kayed, Senior Software Engineer, Noser Engineering AG"),
    ("Growing and Thriving as an Engineering Manager", "15:55 - 17:05", None, "CINEMA 3",
     "Taylor Poindexter, Spotify - Engineering Manager II"),
]

ARTICLE_TASK = """Write a concise but engaging 400-word article about the ".NET Day Switzerland" conference for 2024. The article should cover the conference's purpose, key highlights, the non-profit nature of the event, and the diverse sessions offered. Make sure it appeals to developers, architects, and experts as well as Team Leads and CTO's and includes a strong and catchy title.
Also highlight the topics covered, some speakers, and the community engagement aspect."""


def format_agenda(agenda=CONFERENCE_AGENDA) -> str:
    """Render the agenda as a numbered markdown list."""
    lines = ["### Full Agenda:", ""]
    for number, (title, time_slot, level, room, speaker) in enumerate(agenda, 1):
        slot = " ".join(part for part in (time_slot, level, room) if part)
        lines.append(f"{number}. **{title}**")
        lines.append(f"   - **Time**: {slot}")
        lines.append(f"   - **Speaker**: {speaker}")
        lines.append("")
    return "\n".join(lines).rstrip()


def conference_description() -> str:
    """Summary plus full agenda, the fact checker's source material."""
    return f"{CONFERENCE_SUMMARY}\n\n{format_agenda()}"
