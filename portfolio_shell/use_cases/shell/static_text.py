"""
Static text printed by the terminal.
"""

BANNER = (
    "Portfolio OS Terminal [Version 1.0.0]",
    "(c) Portfolio Corporation. All rights reserved.",
    'Type "help" for a list of commands.',
)

HELP_MESSAGE = """Available commands:

SYSTEM:
  help      - Show this help message
  clear     - Clear the terminal screen
  date      - Display current date and time
  matrix    - Enter the matrix
  neofetch  - Display system information

FILESYSTEM:
  ls [path]     - List directory contents
  cd <path>     - Change directory
  pwd           - Print working directory
  tree [path]   - Show directory tree
  cat <file>    - Display file contents
  open <file>   - Open file/folder in GUI
  find <name>   - Search for files

PORTFOLIO:
  projects  - View all projects
  about     - Open bio
  contact   - View contact info

OTHER:
  emails    - List collected emails"""

NEOFETCH_OUTPUT = r"""
        ,.=:!!t3Z3z.,                -----------
       :i:i|i|i|i|i|i:iH3s.,           OS: Portfolio OS
      |i|i|i|i|i|i|i|i|i|i|iHS.        Kernel: 1.0.0-py
      ;i|i|i|i|i|i|i|i|i|i|i|i|i:       Uptime: just now
     .i|i|i|i|i|i|i|i|i|i|i|i|i|i:      Shell: term.sh
     :|i|i|i|i|i|i|i|i|i|i|i|i|i|i|      Resolution: 1920x1080
     ;i|i|i|i|i|i|i|i|i|i|i|i|i|i|i      DE: PortfolioWM
    :i|i|i|i|i|i|i|i|i|i|i|i|i|i|i|i     CPU: Your Brain
   .i|i|i|i|i|i|i|i|i|i|i|i|i|i|i|i|i    GPU: Imagination
   |i|i|i|i|i|i|i|i|i|i|i|i|i|i|i|i|i|   Memory: Probably fine
"""
