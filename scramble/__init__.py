"""word-scramble: spell as many words as you can from one root word."""
