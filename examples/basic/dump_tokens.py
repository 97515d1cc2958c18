"""Print the token stream for a small stylesheet."""

from modlex import tokenize

source = """\
// Primary buttons
UIButton.primary {
  background-color #1e90ff;
  corner-radius 4pt;
}
"""

for token in tokenize(source):
    print(token)
