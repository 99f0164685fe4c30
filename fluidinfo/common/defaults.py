# The Fluidinfo instances a session can be pointed at by name.  Any other
# instance must be given as an absolute URL ending in a slash.
instances = {
    'main': 'https://fluiddb.fluidinfo.com/',
    'sandbox': 'https://sandbox.fluidinfo.com/',
}
defaultInstance = 'main'

# Separator used between namespace and tag names.
sep = '/'

# Top-level HTTP API categories.
httpObjectCategoryName = 'objects'
httpAboutCategoryName = 'about'
httpValueCategoryName = 'values'

# Paths under these categories address a single tag value directly, so
# primitive payloads PUT to them are sent with the primitive content type.
valueEndpointCategories = (httpObjectCategoryName, httpAboutCategoryName)

# The system tags used to refer to an object in a query.
aboutTagPath = 'fluiddb/about'
idTagPath = 'fluiddb/id'

# Default charset
charset = 'utf-8'

# Types for PUT/GET of primitive values.
# Note: this must be lower case (we compare lowercased incoming
# content-type headers against this string).
contentTypeForPrimitiveJSON = 'application/vnd.fluiddb.value+json'
contentTypeForJSON = 'application/json'

# Content types whose payloads are parsed as JSON when a response arrives.
jsonContentTypes = (contentTypeForJSON, contentTypeForPrimitiveJSON)

# Methods that never carry a request payload.
methodsWithoutPayload = ('GET', 'HEAD', 'DELETE')

# Keys used in the /values request and response payloads.
tagArg = 'tag'
queryArg = 'query'
queriesKey = 'queries'
resultsKey = 'results'
idKey = 'id'
valueKey = 'value'
valueTypeKey = 'value-type'
sizeKey = 'size'
urlKey = 'url'
