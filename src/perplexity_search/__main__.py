from perplexity_search.server import main

main()
